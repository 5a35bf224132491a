"""Test suite for band_chart module."""
import numpy as np
import pytest

from band_chart import BandCutChart, ChartError, frequency_sweep
from calculator import calculate
from presets import BandPresets


class TestFrequencySweep:
    """Test sweep generation."""

    def test_endpoints_included(self):
        freqs = frequency_sweep(14.0, 14.35, 8)
        assert len(freqs) == 8
        assert freqs[0] == 14.0
        assert freqs[-1] == pytest.approx(14.35)

    def test_reversed_range(self):
        with pytest.raises(ChartError):
            frequency_sweep(14.35, 14.0)

    def test_non_positive_start(self):
        with pytest.raises(ChartError):
            frequency_sweep(0, 14.0)

    def test_too_few_points(self):
        with pytest.raises(ChartError):
            frequency_sweep(14.0, 14.35, 1)


class TestBandCutChart:
    """Test sweep calculations, tables and plots."""

    def test_invalid_velocity_factor(self):
        with pytest.raises(ChartError):
            BandCutChart(1.2)
        with pytest.raises(ChartError):
            BandCutChart("abc")

    def test_text_velocity_factor(self):
        assert BandCutChart("0.9").velocity_factor == 0.9

    def test_sweep_matches_calculator(self):
        chart = BandCutChart(0.95)
        freqs = frequency_sweep(7.0, 7.2, 5)
        sweep = chart.calculate_sweep(freqs)

        for i, freq in enumerate(freqs):
            expected = calculate(float(freq), 0.95)
            assert sweep['wavelength_m'][i] == pytest.approx(expected.wavelength_m, rel=1e-12)
            assert sweep['full_dipole_length_m'][i] == pytest.approx(expected.full_dipole_length_m, rel=1e-12)
            assert sweep['branch_length_m'][i] == pytest.approx(expected.branch_length_m, rel=1e-12)

    def test_sweep_is_monotonic(self):
        sweep = BandCutChart().calculate_sweep(frequency_sweep(3.5, 3.8, 10))
        assert np.all(np.diff(sweep['branch_length_m']) < 0)

    def test_sweep_rejects_bad_frequencies(self):
        chart = BandCutChart()
        with pytest.raises(ChartError):
            chart.calculate_sweep([])
        with pytest.raises(ChartError):
            chart.calculate_sweep([14.0, -1.0])
        with pytest.raises(ChartError):
            chart.calculate_sweep([14.0, float('nan')])

    def test_band_lengths(self):
        chart = BandCutChart(0.95)
        data = chart.calculate_band_lengths(BandPresets.get_band('20m'))

        assert data['band_name'] == '20m'
        assert data['branch_spread_m'] > 0
        assert data['sweep']['branch_length_m'][1] == pytest.approx(
            calculate(14.150, 0.95).branch_length_m)

    def test_compare_bands_sorted(self):
        bands = [BandPresets.get_band(name) for name in ('10m', '80m', '20m')]
        names = [item['band_name'] for item in BandCutChart().compare_bands(bands)]
        assert names == ['80m', '20m', '10m']

    def test_render_table(self):
        chart = BandCutChart(0.95)
        table = chart.render_table(chart.calculate_sweep([14.15]))
        lines = table.splitlines()

        assert len(lines) == 3
        assert 'λ/4 (m)' in lines[0]
        assert '14.150' in lines[2]
        assert '5.032' in lines[2]
        assert '503.2' in lines[2]

    def test_plot_sweep(self, tmp_path):
        chart = BandCutChart(0.95)
        sweep = chart.calculate_sweep(frequency_sweep(14.0, 14.35, 5))
        path = chart.plot_sweep(sweep, str(tmp_path / "cut.png"))

        assert path.endswith("cut.png")
        assert (tmp_path / "cut.png").stat().st_size > 0

    def test_plot_sweep_unwritable(self, tmp_path):
        chart = BandCutChart(0.95)
        sweep = chart.calculate_sweep([14.0, 14.35])
        with pytest.raises(ChartError):
            chart.plot_sweep(sweep, str(tmp_path / "missing" / "cut.png"))
