"""Reference dataset: two years of monthly readings for a 10 000 m² building."""

from .models import RawObservation

SAMPLE_AREA = "10000"

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# (energy kWh, HDD, CDD) per month
_READINGS = {
    "2023": (
        (120000, 450, 10), (115000, 400, 15), (100000, 300, 50),
        (85000, 150, 100), (90000, 50, 200), (105000, 10, 300),
        (115000, 0, 350), (110000, 5, 320), (95000, 40, 220),
        (88000, 120, 110), (102000, 280, 40), (118000, 420, 10),
    ),
    "2024": (
        (118000, 460, 5), (112000, 410, 20), (98000, 310, 60),
        (82000, 140, 110), (87000, 60, 210), (102000, 15, 310),
        (113000, 0, 360), (108000, 10, 330), (93000, 45, 230),
        (86000, 130, 120), (100000, 290, 45), (116000, 430, 15),
    ),
}

SAMPLE_OBSERVATIONS = tuple(
    RawObservation(
        year=year, month=month, energy=str(energy), hdd=str(hdd), cdd=str(cdd)
    )
    for year, readings in _READINGS.items()
    for month, (energy, hdd, cdd) in zip(_MONTHS, readings)
)
