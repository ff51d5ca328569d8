"""Profile preset tests."""

import pytest

from odf2json.profile import Profile, ProfileName, available_profiles, get_profile


class TestRegistry:
    @pytest.mark.parametrize("name", list(ProfileName))
    def test_lookup(self, name):
        assert get_profile(name).name == name

    def test_unknown(self):
        with pytest.raises(ValueError, match="unknown profile"):
            get_profile("tanks")

    def test_available(self):
        assert available_profiles() == sorted(p.value for p in ProfileName)

    def test_weapon_keeps_noise(self):
        assert get_profile("weapon").filter_noise is False
        assert get_profile("vehicle").filter_noise is True


class TestMatches:
    @pytest.mark.parametrize("name", ["fvscout.odf", "IVTANK.ODF", "evmisl.odf", "cvrecy.odf"])
    def test_vehicle_includes(self, name):
        assert get_profile("vehicle").matches(name)

    @pytest.mark.parametrize("name", ["fbrecy.odf", "ivtank_config.odf", "IVTANK_CONFIG.odf"])
    def test_vehicle_excludes(self, name):
        assert not get_profile("vehicle").matches(name)

    def test_pilot(self):
        profile = get_profile("pilot")
        assert profile.matches("isuser.odf")
        assert not profile.matches("ivscout.odf")

    def test_no_prefixes_matches_everything(self):
        assert get_profile("weapon").matches("gspstab.odf")

    def test_custom_profile(self):
        profile = Profile("mine", "out.json", include_prefixes=("x",), exclude_substrings=("tmp",))
        assert profile.matches("Xfile.odf")
        assert not profile.matches("xfile_TMP.odf")
