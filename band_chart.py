"""
Band Cut Chart Module

Tabulates and plots half-wave dipole dimensions across a frequency range, so a
builder can see how much the branches change across a band before cutting.
"""

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
from pathlib import Path
from typing import Dict, List, Optional, Any
from loguru import logger

from calculator import SPEED_OF_LIGHT, HZ_PER_MHZ, ValidationError, calculate, parse_number
from core import PerformanceMonitor
from presets import AmateurBand, DEFAULT_VELOCITY_FACTOR


class ChartError(Exception):
    """Custom exception for chart generation failures."""
    pass


def frequency_sweep(start_mhz: float, stop_mhz: float, points: int = 11) -> np.ndarray:
    """Evenly spaced frequencies from start to stop inclusive.

    Raises:
        ChartError: If the range is empty or not positive, or points < 2
    """
    if not (0 < start_mhz < stop_mhz):
        raise ChartError(f"Sweep needs 0 < start < stop, got {start_mhz}-{stop_mhz} MHz")
    if points < 2:
        raise ChartError(f"Sweep needs at least 2 points, got {points}")
    return np.linspace(start_mhz, stop_mhz, points)


class BandCutChart:
    """Dipole length tables and plots over a frequency sweep."""

    def __init__(self, velocity_factor: float = DEFAULT_VELOCITY_FACTOR):
        """Initialize with the element velocity factor.

        Raises:
            ChartError: If the velocity factor is rejected by the calculator
        """
        # Reuse the calculator's rules so the chart and the core agree
        check = calculate(1.0, velocity_factor)
        if isinstance(check, ValidationError):
            raise ChartError(f"Invalid velocity factor {velocity_factor!r}: {check.kind.value}")

        self.velocity_factor = parse_number(velocity_factor)
        self.colors = ['#1f77b4', '#ff7f0e', '#2ca02c']

        logger.debug(f"BandCutChart initialized with velocity factor {self.velocity_factor}")

    @PerformanceMonitor.measure_time
    def calculate_sweep(self, frequencies_mhz) -> Dict[str, np.ndarray]:
        """Calculate wavelength, full dipole and branch lengths for each frequency.

        Args:
            frequencies_mhz: Sequence of positive frequencies in MHz

        Returns:
            dict: Arrays keyed frequency_mhz, wavelength_m, full_dipole_length_m,
            branch_length_m
        """
        freqs = np.asarray(frequencies_mhz, dtype=float)
        if freqs.ndim != 1 or freqs.size == 0:
            raise ChartError("Sweep needs a non-empty one-dimensional frequency list")
        if not np.all(np.isfinite(freqs)) or np.any(freqs <= 0):
            raise ChartError("Sweep frequencies must be finite and positive")

        wavelength = (SPEED_OF_LIGHT * self.velocity_factor) / (freqs * HZ_PER_MHZ)

        logger.debug(f"Calculated sweep over {freqs.size} frequencies "
                     f"({freqs.min():.3f}-{freqs.max():.3f} MHz)")
        return {
            'frequency_mhz': freqs,
            'wavelength_m': wavelength,
            'full_dipole_length_m': wavelength / 2,
            'branch_length_m': wavelength / 4,
        }

    def calculate_band_lengths(self, band: AmateurBand) -> Dict[str, Any]:
        """Dimensions at the lower edge, center and upper edge of a band.

        Returns:
            dict: Band name, the sweep arrays and the branch length spread in meters
        """
        sweep = self.calculate_sweep([band.lower_mhz, band.center_mhz, band.upper_mhz])
        branch = sweep['branch_length_m']
        spread = float(branch[0] - branch[-1])

        logger.info(f"{band.name}: branch {branch[1]:.3f} m at {band.center_mhz} MHz, "
                    f"{spread * 100:.1f} cm across the band")
        return {
            'band_name': band.name,
            'sweep': sweep,
            'branch_spread_m': spread,
        }

    @staticmethod
    def render_table(sweep: Dict[str, np.ndarray], decimals: int = 3) -> str:
        """Fixed-width text table of a sweep."""
        header = f"{'MHz':>10}  {'λ (m)':>10}  {'λ/2 (m)':>10}  {'λ/4 (m)':>10}  {'λ/4 (cm)':>10}"
        lines = [header, "-" * len(header)]
        for freq, wavelength, full, branch in zip(sweep['frequency_mhz'], sweep['wavelength_m'],
                                                  sweep['full_dipole_length_m'], sweep['branch_length_m']):
            lines.append(f"{freq:>10.3f}  {wavelength:>10.{decimals}f}  {full:>10.{decimals}f}  "
                         f"{branch:>10.{decimals}f}  {branch * 100:>10.1f}")
        return "\n".join(lines)

    def plot_sweep(self, sweep: Dict[str, np.ndarray], save_path: str = "dipole_cut_chart.png",
                   title: Optional[str] = None, figsize: tuple = (10, 6)) -> str:
        """Plot full dipole and branch length against frequency.

        Returns:
            str: Path to saved chart file

        Raises:
            ChartError: If the figure cannot be written
        """
        title = title or f"Half-wave dipole dimensions (VF {self.velocity_factor:.2f})"
        fig, ax = plt.subplots(figsize=figsize)
        try:
            freqs = sweep['frequency_mhz']
            ax.plot(freqs, sweep['full_dipole_length_m'], color=self.colors[0], marker='o',
                    label='Full dipole (λ/2)')
            ax.plot(freqs, sweep['branch_length_m'], color=self.colors[1], marker='s',
                    label='Branch (λ/4)')

            ax.set_xlabel('Frequency (MHz)')
            ax.set_ylabel('Length (m)')
            ax.set_title(title, fontweight='bold')
            ax.grid(True, alpha=0.3)
            ax.legend()

            fig.tight_layout()
            fig.savefig(save_path, dpi=150)
            logger.info(f"Chart saved to {save_path}")
            return str(Path(save_path))

        except (OSError, ValueError) as e:
            logger.error(f"Error saving chart to {save_path}: {str(e)}")
            raise ChartError(f"Failed to save chart: {str(e)}") from e
        finally:
            plt.close(fig)

    def compare_bands(self, bands: List[AmateurBand]) -> List[Dict[str, Any]]:
        """Band length summaries sorted by center frequency."""
        ordered = sorted(bands, key=lambda b: b.center_mhz)
        return [self.calculate_band_lengths(band) for band in ordered]
