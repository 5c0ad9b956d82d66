"""Static fruit definitions loaded into the store at startup."""

DEFAULT_FRUITS = (
    {"name": "apple", "color": "red", "readyToEat": True},
    {"name": "pear", "color": "green", "readyToEat": False},
    {"name": "banana", "color": "yellow", "readyToEat": True},
)
