"""
User profile model. Numeric fields carry the same ranges the profile form
enforces.
"""

from pydantic import BaseModel, Field


class UserProfile(BaseModel):
    """Dietary profile used to personalise chat responses."""
    age: int = Field(default=24, ge=1, le=120, description="Age in years")
    sex: str = Field(default="Female", description="Sex / gender")
    diet: str = Field(default="Vegetarian", description="Diet type (e.g., Vegan, Jain, Keto)")
    region: str = Field(default="Any", description="Region of India")
    budget: float = Field(default=70, ge=0, le=10000, description="Budget in rupees per meal")
    allergies: str = Field(default="", description="Free-text allergies")
    goals: str = Field(default="", description="Free-text health goals")
    height: float = Field(default=160, gt=0, le=300, description="Height in cm")
    weight: float = Field(default=60, gt=0, le=500, description="Weight in kg")

    @property
    def bmi(self) -> float:
        return round(self.weight / ((self.height / 100) ** 2), 1)

    @property
    def bmi_status(self) -> str:
        return bmi_status(self.bmi)


def bmi_status(bmi: float) -> str:
    if bmi < 18.5:
        return "underweight"
    if bmi > 24.9:
        return "overweight"
    return "normal weight"
