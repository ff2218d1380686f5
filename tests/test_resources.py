"""Tests for mineral richness and element abundance."""

import pytest
from py_planetgen.config.reference_data import ElementInfo, ReferenceData, default_reference_data
from py_planetgen.core.alea_prng import AleaPRNG
from py_planetgen.core.resources import (
    BASE_MINERAL_RANGES,
    NONE_DETECTED,
    MineralRichness,
    ResourceProfile,
    calculate_base_minerals,
    calculate_element_abundance,
    determine_mineral_richness,
    determine_primary_resource,
    generate_resources,
)


class TestMineralRichness:
    """Test richness rolls."""

    @pytest.mark.parametrize("planet_type", ["GasGiant", "IceGiant"])
    def test_giants_have_none(self, planet_type):
        """Gas and ice giants have no minerals."""
        for i in range(20):
            assert determine_mineral_richness(AleaPRNG(f"g{i}"), planet_type) == MineralRichness.NONE

    def test_solid_bodies_have_some(self):
        """Solid bodies always roll a real richness."""
        for planet_type in ("Rock", "Molten", "Lunar", "Frozen", "Oceanic"):
            for i in range(50):
                richness = determine_mineral_richness(AleaPRNG(f"{planet_type}{i}"), planet_type)
                assert richness != MineralRichness.NONE

    def test_rock_reaches_every_class(self):
        """Rocky bodies can roll every richness class."""
        seen = {determine_mineral_richness(AleaPRNG(f"rock-{i}"), "Rock") for i in range(500)}
        assert seen == set(MineralRichness) - {MineralRichness.NONE}

    def test_ordering(self):
        """Richness is an ordinal scale."""
        assert MineralRichness.NONE < MineralRichness.ULTRA_POOR < MineralRichness.ULTRA_RICH


class TestBaseMinerals:
    """Test base mineral yield."""

    @pytest.mark.parametrize("richness", list(BASE_MINERAL_RANGES))
    def test_within_range(self, richness):
        """Yield stays within the richness range."""
        low, high = BASE_MINERAL_RANGES[richness]
        for i in range(30):
            assert low <= calculate_base_minerals(AleaPRNG(f"bm{i}"), richness) <= high

    def test_none_is_zero(self):
        """No richness means no yield."""
        assert calculate_base_minerals(AleaPRNG("none"), MineralRichness.NONE) == 0


class TestElementAbundance:
    """Test element abundance weighting."""

    @pytest.fixture
    def reference(self):
        return default_reference_data()

    def test_sums_to_hundred(self, reference):
        """Abundances are percentages of the total."""
        abundance = calculate_element_abundance(
            AleaPRNG("sum"), "Rock", 288, "Iron-Rich Crust, Evidence of Metallic Core", 1.0, reference
        )
        assert sum(abundance.values()) == pytest.approx(100.0)
        assert all(value > 0 for value in abundance.values())
        assert set(abundance) == set(reference.elements)

    def test_empty_catalogue(self):
        """No elements gives an empty map."""
        reference = ReferenceData(elements={})
        assert calculate_element_abundance(AleaPRNG("empty"), "Rock", 288, "", 1.0, reference) == {}

    def test_zero_frequency_skipped(self):
        """Elements with zero base frequency are not mineable."""
        reference = ReferenceData(
            elements={
                "IRON": ElementInfo(name="Iron", symbol="Fe", base_frequency=10, melting_point=1811,
                                    atomic_weight=55.85, group="Metal"),
                "NOTHING": ElementInfo(name="Nothing", symbol="X", base_frequency=0, melting_point=1,
                                       atomic_weight=1, group="Metal"),
            }
        )
        abundance = calculate_element_abundance(AleaPRNG("zero"), "Rock", 288, "", 1.0, reference)
        assert abundance == {"IRON": pytest.approx(100.0)}

    def test_giants_favour_gases(self, reference):
        """Gas giants are dominated by gaseous elements."""
        abundance = calculate_element_abundance(AleaPRNG("giant"), "GasGiant", 150, "No Solid Surface Defined", 2.5, reference)
        gas_share = sum(v for k, v in abundance.items() if reference.elements[k].is_gas)
        assert gas_share > 50.0

    def test_deterministic(self, reference):
        """Same seed gives the same abundances."""
        args = ("Lunar", 250, "Impact-Pulverized Regolith, Basaltic Maria, Scarce Volatiles", 0.2, reference)
        assert calculate_element_abundance(AleaPRNG("d"), *args) == calculate_element_abundance(AleaPRNG("d"), *args)


class TestResourceProfile:
    """Test the combined resource profile and scan label."""

    @pytest.fixture
    def reference(self):
        return default_reference_data()

    def test_generate_resources(self, reference):
        """Profiles combine richness, yield and abundance."""
        profile = generate_resources(AleaPRNG("profile"), "Rock", 288, "Silicate Rock", 1.0, reference)
        assert profile.richness != MineralRichness.NONE
        low, high = BASE_MINERAL_RANGES[profile.richness]
        assert low <= profile.base_minerals <= high
        assert sum(profile.element_abundance.values()) == pytest.approx(100.0)

    def test_primary_resource_is_most_abundant(self, reference):
        """The scan label names the most abundant element."""
        profile = ResourceProfile(
            richness=MineralRichness.AVERAGE, base_minerals=40, element_abundance={"IRON": 60.0, "GOLD": 40.0}
        )
        assert determine_primary_resource(profile, reference) == "Iron"

    def test_primary_resource_none(self, reference):
        """Bodies without minerals report nothing."""
        profile = ResourceProfile(richness=MineralRichness.NONE, base_minerals=0, element_abundance={"HYDROGEN": 100.0})
        assert determine_primary_resource(profile, reference) == NONE_DETECTED

    def test_richness_names(self):
        """Profiles expose a display name for richness."""
        profile = ResourceProfile(richness=MineralRichness.ULTRA_RICH, base_minerals=150)
        assert profile.richness_name == "Ultra Rich"
