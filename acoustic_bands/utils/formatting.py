"""
Formatierungsfunktionen für Anzeige.

Konvertiert Frequenzen und Pegel in lesbare Strings und zurück.
"""

from ..core.band_table import RelativeBandwidth
from ..core.errors import InvalidArgumentError


def _strip_zeros(text: str) -> str:
    return text.rstrip("0").rstrip(".") if "." in text else text


def format_frequency(hz: float) -> str:
    """
    Formatiere Frequenz in lesbares Format.

    Unter 1 kHz höchstens eine Nachkommastelle, darüber höchstens vier
    (in kHz). Nullen am Ende werden entfernt.

    Args:
        hz: Frequenz in Hz

    Returns:
        Formatierter String (z.B. "15.6 Hz", "1.25 kHz" oder "4 kHz")
    """
    if hz < 1000:
        return f"{_strip_zeros(f'{hz:.1f}')} Hz"
    else:
        return f"{_strip_zeros(f'{hz / 1000:.4f}')} kHz"


def parse_frequency(text: str) -> float:
    """
    Lese Frequenz aus einem (ggf. abgekürzten) String.

    Akzeptiert "Hz" und "kHz", mit oder ohne Leerzeichen, sowie reine Zahlen.

    Args:
        text: z.B. "1.25 kHz", "125Hz" oder "250"

    Returns:
        Frequenz in Hz

    Raises:
        InvalidArgumentError: String ist keine Frequenz
    """
    value = text.strip()
    factor = 1.0
    if value.endswith("kHz"):
        value = value[:-3]
        factor = 1000.0
    elif value.endswith("Hz"):
        value = value[:-2]

    try:
        return float(value.strip().replace(",", "")) * factor
    except ValueError:
        raise InvalidArgumentError(f"Not a frequency: {text!r}") from None


def format_db(db: float, precision: int = 1) -> str:
    """
    Formatiere dB-Wert.

    Args:
        db: Pegel in dB
        precision: Nachkommastellen

    Returns:
        Formatierter String (z.B. "-12.3 dB")
    """
    if db == float('-inf'):
        return "-∞ dB"
    return f"{db:.{precision}f} dB"


def format_octave_divider(octave_divider: int) -> str:
    """
    Formatiere Oktavteiler als relative Bandbreite.

    Returns:
        z.B. "1/3 octave" oder "1 octave"
    """
    return RelativeBandwidth.from_octave_divider(octave_divider).label
