"""Test suite for presets module."""
import pytest

from calculator import calculate
from presets import (AmateurBand, BandPresets, BandType, CABLE_VELOCITY_FACTORS,
                     DEFAULT_VELOCITY_FACTOR, get_cable_velocity_factor)


class TestAmateurBand:
    """Test band definitions."""

    def test_center_defaults_to_middle(self):
        band = AmateurBand('40m', BandType.HF, 7.0, 7.2)
        assert band.center_mhz == pytest.approx(7.1)

    def test_contains_edges(self):
        band = AmateurBand('40m', BandType.HF, 7.0, 7.2)
        assert band.contains(7.0)
        assert band.contains(7.2)
        assert not band.contains(7.3)

    def test_invalid_edges(self):
        with pytest.raises(ValueError):
            AmateurBand('bad', BandType.HF, 7.2, 7.0)

    def test_center_outside_band(self):
        with pytest.raises(ValueError):
            AmateurBand('bad', BandType.HF, 7.0, 7.2, center_mhz=7.5)

    def test_cut_lengths_match_calculator(self):
        band = BandPresets.get_band('20m')
        assert band.cut_lengths(0.95) == calculate(14.150, 0.95)

    def test_cut_lengths_reject_bad_velocity_factor(self):
        with pytest.raises(ValueError):
            BandPresets.get_band('20m').cut_lengths(1.5)


class TestBandPresets:
    """Test the predefined band collection."""

    def test_all_centers_inside_their_band(self):
        for band in BandPresets.get_all_bands().values():
            assert band.contains(band.center_mhz), band.name

    def test_default_cut_lengths_positive(self):
        for band in BandPresets.get_all_bands().values():
            cut = band.cut_lengths()
            assert cut.branch_length_m > 0

    def test_find_band(self):
        assert BandPresets.find_band(14.150).name == '20m'
        assert BandPresets.find_band(145.5).name == '2m'
        assert BandPresets.find_band(15.0) is None

    def test_get_unknown_band(self):
        with pytest.raises(KeyError):
            BandPresets.get_band('99m')

    def test_bands_by_type(self):
        uhf = BandPresets.get_bands_by_type(BandType.UHF)
        assert [band.name for band in uhf] == ['70cm']

    def test_create_custom_band(self):
        band = BandPresets.create_custom_band('CB', 26.965, 27.405)
        assert band.band_type == BandType.CUSTOM
        assert band.contains(27.185)
        assert 'Custom band' in band.description

    def test_create_custom_band_rejects_non_positive(self):
        with pytest.raises(ValueError):
            BandPresets.create_custom_band('bad', 0, 10)

    def test_create_custom_band_from_text(self):
        band = BandPresets.create_custom_band('40m', "7", "7,2", center_mhz="7.05")
        assert band.lower_mhz == 7.0
        assert band.upper_mhz == 7.2
        assert band.center_mhz == 7.05

    def test_create_custom_band_rejects_text_garbage(self):
        with pytest.raises(ValueError, match="positive number"):
            BandPresets.create_custom_band('bad', "seven", "7.2")
        with pytest.raises(ValueError, match="must be a number"):
            BandPresets.create_custom_band('bad', "7", "7.2", center_mhz="mid")


class TestCableVelocityFactors:
    """Test velocity factor presets."""

    def test_default_velocity_factor(self):
        assert DEFAULT_VELOCITY_FACTOR == 0.95

    def test_all_factors_in_range(self):
        for name, vf in CABLE_VELOCITY_FACTORS.items():
            assert 0 < vf <= 1, name

    def test_lookup(self):
        assert get_cable_velocity_factor('coax_solid_pe') == 0.66
        with pytest.raises(KeyError):
            get_cable_velocity_factor('wet_string')
