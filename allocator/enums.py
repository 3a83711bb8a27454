from enum import Enum


class Bucket(Enum):
    """The four allocation buckets, in canonical reporting order."""
    MULTIPLY = "Multiply"       # investing / growth
    ESSENTIALS = "Essentials"   # cost-of-living floor
    FREEDOM = "Freedom"         # debt pay-down / emergency buffer
    ENJOYMENT = "Enjoyment"     # discretionary spending


class NoteCategory(Enum):
    """Modifier families; also the order notes are concatenated in."""
    FINANCIAL = "Financial"
    BEHAVIORAL = "Behavioral"
    MOTIVATIONAL = "Motivational"
