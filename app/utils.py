import math


def cx(*classes) -> str:
    return " ".join(c for c in classes if c)


def calculate_reading_time(text: str) -> str:
    words = text.split()
    minutes = math.ceil(len(words) / 200) or 1
    return f"{minutes} min"
