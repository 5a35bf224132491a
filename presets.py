"""Amateur band and cable velocity factor presets for dipole cutting."""
from typing import Dict, List, Optional
from enum import Enum
from loguru import logger

from calculator import CalculatorResult, ValidationError, calculate, parse_number

# Typical factor for bare or thinly insulated copper wire elements
DEFAULT_VELOCITY_FACTOR = 0.95

# Velocity factors of common conductors and feed lines
CABLE_VELOCITY_FACTORS: Dict[str, float] = {
    'bare_copper_wire': 0.95,
    'insulated_wire_pvc': 0.93,
    'ladder_line_450': 0.91,
    'twin_lead_300': 0.82,
    'coax_foam_pe': 0.82,
    'coax_solid_ptfe': 0.70,
    'coax_solid_pe': 0.66,
}


class BandType(Enum):
    """ITU frequency range of an amateur band."""
    HF = "hf"
    VHF = "vhf"
    UHF = "uhf"
    CUSTOM = "custom"


class AmateurBand:
    """An amateur allocation with the frequency a dipole is usually cut for."""

    def __init__(self, name: str, band_type: BandType, lower_mhz: float, upper_mhz: float,
                 center_mhz: Optional[float] = None, description: str = ""):
        """Initialize amateur band.

        Args:
            name: Common band name (e.g. '20m')
            band_type: HF, VHF or UHF
            lower_mhz: Lower band edge in MHz
            upper_mhz: Upper band edge in MHz
            center_mhz: Design frequency, defaults to the middle of the band
            description: Short description of band usage
        """
        if not 0 < lower_mhz < upper_mhz:
            raise ValueError(f"Invalid band edges for {name}: {lower_mhz}-{upper_mhz} MHz")

        self.name = name
        self.band_type = band_type
        self.lower_mhz = lower_mhz
        self.upper_mhz = upper_mhz
        self.center_mhz = center_mhz if center_mhz is not None else (lower_mhz + upper_mhz) / 2
        self.description = description

        if not self.contains(self.center_mhz):
            raise ValueError(f"Center {self.center_mhz} MHz outside {name} band edges")

    def contains(self, frequency_mhz: float) -> bool:
        """Check if a frequency lies within the band edges."""
        return self.lower_mhz <= frequency_mhz <= self.upper_mhz

    def cut_lengths(self, velocity_factor: float = DEFAULT_VELOCITY_FACTOR) -> CalculatorResult:
        """Dipole dimensions for the band center frequency."""
        result = calculate(self.center_mhz, velocity_factor)
        if isinstance(result, ValidationError):
            raise ValueError(f"Cannot cut {self.name} dipole with velocity factor {velocity_factor}: "
                             f"{result.kind.value}")
        return result

    def __repr__(self) -> str:
        return f"AmateurBand({self.name!r}, {self.lower_mhz}-{self.upper_mhz} MHz)"


class BandPresets:
    """Collection of predefined amateur bands (IARU Region 1 edges)."""

    @staticmethod
    def get_all_bands() -> Dict[str, AmateurBand]:
        """Return all predefined bands keyed by band name."""
        return {
            # HF
            '160m': AmateurBand('160m', BandType.HF, 1.810, 2.000,
                                description='Top band, night-time regional and DX'),
            '80m': AmateurBand('80m', BandType.HF, 3.500, 3.800,
                               description='Regional contacts, NVIS'),
            '60m': AmateurBand('60m', BandType.HF, 5.3515, 5.3665,
                               description='Narrow secondary allocation'),
            '40m': AmateurBand('40m', BandType.HF, 7.000, 7.200,
                               description='Workhorse day and night band'),
            '30m': AmateurBand('30m', BandType.HF, 10.100, 10.150,
                               description='CW and digital modes only'),
            '20m': AmateurBand('20m', BandType.HF, 14.000, 14.350, center_mhz=14.150,
                               description='Primary daytime DX band'),
            '17m': AmateurBand('17m', BandType.HF, 18.068, 18.168,
                               description='WARC band, DX'),
            '15m': AmateurBand('15m', BandType.HF, 21.000, 21.450,
                               description='Daytime DX near solar maximum'),
            '12m': AmateurBand('12m', BandType.HF, 24.890, 24.990,
                               description='WARC band, DX'),
            '10m': AmateurBand('10m', BandType.HF, 28.000, 29.700, center_mhz=28.500,
                               description='Sporadic-E and F2 openings'),

            # VHF / UHF
            '6m': AmateurBand('6m', BandType.VHF, 50.000, 52.000, center_mhz=50.150,
                              description='Magic band, sporadic-E'),
            '2m': AmateurBand('2m', BandType.VHF, 144.000, 146.000, center_mhz=145.000,
                              description='FM repeaters, SSB and satellites'),
            '70cm': AmateurBand('70cm', BandType.UHF, 430.000, 440.000, center_mhz=435.000,
                                description='FM repeaters, satellites, ATV'),
        }

    @staticmethod
    def get_band(key: str) -> AmateurBand:
        """Get a band by name, raising KeyError listing the known names."""
        bands = BandPresets.get_all_bands()
        if key not in bands:
            raise KeyError(f"Unknown band '{key}'. Available: {', '.join(bands)}")
        return bands[key]

    @staticmethod
    def get_bands_by_type(band_type: BandType) -> List[AmateurBand]:
        """Get all bands of a specific type."""
        all_bands = BandPresets.get_all_bands()
        return [band for band in all_bands.values() if band.band_type == band_type]

    @staticmethod
    def find_band(frequency_mhz: float) -> Optional[AmateurBand]:
        """Return the band containing a frequency, or None outside the allocations."""
        for band in BandPresets.get_all_bands().values():
            if band.contains(frequency_mhz):
                return band
        logger.debug(f"{frequency_mhz} MHz is outside all amateur band presets")
        return None

    @staticmethod
    def create_custom_band(name: str, lower_mhz: float, upper_mhz: float,
                           center_mhz: Optional[float] = None, description: str = "") -> AmateurBand:
        """Create a custom band from user supplied edges."""
        try:
            edges = []
            for freq in (lower_mhz, upper_mhz):
                value = parse_number(freq)
                if value is None or value <= 0:
                    raise ValueError(f"Frequency {freq!r} MHz must be a positive number")
                edges.append(value)
            lower, upper = edges

            center = None
            if center_mhz is not None:
                center = parse_number(center_mhz)
                if center is None:
                    raise ValueError(f"Center frequency {center_mhz!r} MHz must be a number")

            if description == "":
                description = f"Custom band: {lower}-{upper} MHz"

            return AmateurBand(name, BandType.CUSTOM, lower, upper,
                               center_mhz=center, description=description)

        except (TypeError, ValueError) as e:
            logger.error(f"Custom band creation error: {str(e)}")
            raise ValueError(f"Invalid custom band parameters: {str(e)}") from e


def get_cable_velocity_factor(name: str) -> float:
    """Look up a named cable velocity factor."""
    try:
        return CABLE_VELOCITY_FACTORS[name]
    except KeyError:
        raise KeyError(f"Unknown cable '{name}'. Available: {', '.join(CABLE_VELOCITY_FACTORS)}") from None
