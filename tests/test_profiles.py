from __future__ import annotations

from pathlib import Path

import pytest

from trigramid._utils import MAX_PROFILE_SIZE
from trigramid.enums import LANG_SCRIPTS, Lang, Script
from trigramid.profiles import (
    LangProfile,
    get_profile,
    load_profiles,
    parse_profiles,
    select_profile_group,
)

from conftest import SMALL_PROFILES


def test_bundled_profiles_cover_every_script():
    groups = load_profiles()
    assert set(groups) == set(Script)
    for group in groups.values():
        assert len(group) > 0


def test_bundled_profiles_cover_every_language():
    langs = {profile.lang for group in load_profiles().values() for profile in group}
    assert langs == set(Lang)


def test_bundled_profile_ranks_are_dense():
    for group in load_profiles().values():
        for profile in group:
            assert 0 < len(profile) <= MAX_PROFILE_SIZE
            assert len(set(profile.trigrams)) == len(profile.trigrams)
            assert all(len(trigram) == 3 for trigram in profile.trigrams)


def test_bundled_profiles_match_language_scripts():
    for script, group in load_profiles().items():
        for profile in group:
            assert LANG_SCRIPTS[profile.lang] is script


def test_load_profiles_is_cached():
    assert load_profiles() is load_profiles()


def test_select_profile_group_order():
    langs = [profile.lang for profile in select_profile_group(Script.LATIN)]
    assert langs == [Lang.ENG, Lang.FRA, Lang.DEU, Lang.SPA, Lang.POR, Lang.ITA]


def test_get_profile():
    profile = get_profile(Lang.ENG)
    assert isinstance(profile, LangProfile)
    assert profile.trigrams[0] == " th"
    assert profile.trigrams[1] == "the"


def test_load_profiles_from_path(tmp_path: Path):
    path = tmp_path / "custom.tsv"
    path.write_text(SMALL_PROFILES, encoding="utf-8")
    groups = load_profiles(path)
    assert groups[Script.LATIN] == (
        LangProfile(Lang.ENG, ("abc", "bca", "cab")),
        LangProfile(Lang.FRA, ("xyz", "yzx", "zxy")),
    )
    # Explicit paths never replace the cached default profiles.
    assert len(load_profiles()[Script.LATIN]) == 6


def test_env_var_overrides_bundled_profiles(small_profiles: Path):
    assert [p.lang for p in select_profile_group(Script.LATIN)] == [Lang.ENG, Lang.FRA]
    assert get_profile(Lang.DEU) is None


def test_parse_skips_comments_and_blank_lines():
    groups = parse_profiles("\n# comment\n" + SMALL_PROFILES + "\n")
    assert groups[Script.HEBREW] == (LangProfile(Lang.HEB, ("אבג",)),)


def _replace_line(prefix: str, line: str) -> str:
    lines = [
        line if existing.startswith(prefix) else existing
        for existing in SMALL_PROFILES.splitlines()
    ]
    return "\n".join(lines) + "\n"


@pytest.mark.parametrize(
    ("content", "match"),
    [
        (_replace_line("latin\tfra", "latin\tfra"), "expected 3 fields"),
        (_replace_line("latin\tfra", "greek\tfra\txyz"), "unknown script"),
        (_replace_line("latin\tfra", "latin\txxx\txyz"), "unknown language"),
        (_replace_line("latin\tfra", "latin\trus\txyz"), "not written in latin"),
        (_replace_line("latin\tfra", "latin\teng\txyz"), "duplicate language"),
        (_replace_line("latin\tfra", "latin\tfra\txyz|xy"), "not a trigram"),
        (_replace_line("latin\tfra", "latin\tfra\txyz|yzx|xyz"), "duplicate trigrams"),
        (_replace_line("latin\tfra", "latin\tfra\t"), "fra has no trigrams"),
        (_replace_line("hebrew", "# no hebrew"), "no profiles for script"),
    ],
)
def test_parse_rejects_corrupt_data(content: str, match: str):
    with pytest.raises(ValueError, match=match):
        parse_profiles(content)


def test_parse_rejects_oversized_profile():
    trigrams = "|".join(f"{i:03d}" for i in range(MAX_PROFILE_SIZE + 1))
    content = _replace_line("latin\tfra", f"latin\tfra\t{trigrams}")
    with pytest.raises(ValueError, match="limit is"):
        parse_profiles(content)


def test_load_rejects_undecodable_file(tmp_path: Path):
    path = tmp_path / "bad.tsv"
    path.write_bytes(b"latin\teng\t\xff\xfe\xfd\n")
    with pytest.raises(ValueError, match="corrupt profiles"):
        load_profiles(path)
