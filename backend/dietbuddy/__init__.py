"""DietBuddy nutrition assistant backend."""
