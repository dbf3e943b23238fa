"""Unit tests for the who log parser"""

from datetime import datetime, timezone

from src.app.services.who_log_parser import parse_line, parse_timestamp, parse_who_log


class TestParseLine:
    def test_full_line(self):
        sighting = parse_line("[Thu May 25 22:10:50 2023] [60 Warlock] Azrosaurus (Iksar) <Ex Astra>")

        assert sighting is not None
        assert sighting.name == "Azrosaurus"
        assert sighting.level == 60
        assert sighting.class_name == "Warlock"
        assert sighting.guild == "Ex Astra"
        assert sighting.timestamp == datetime(2023, 5, 25, 22, 10, 50, tzinfo=timezone.utc)

    def test_multi_word_class(self):
        sighting = parse_line("[Thu May 25 22:10:50 2023] [60 High Priest] Cleric (Dwarf) <Ex Astra>")

        assert sighting.level == 60
        assert sighting.class_name == "High Priest"
        assert sighting.name == "Cleric"

    def test_anonymous_player(self):
        sighting = parse_line("[Thu May 25 22:10:50 2023] [ANONYMOUS] Sneaky  <Ex Astra>")

        assert sighting is not None
        assert sighting.name == "Sneaky"
        assert sighting.level is None
        assert sighting.class_name is None
        assert sighting.guild == "Ex Astra"

    def test_anonymous_without_guild_is_kept(self):
        sighting = parse_line("[Thu May 25 22:10:50 2023] [ANONYMOUS] Loner")

        assert sighting is not None
        assert sighting.name == "Loner"
        assert sighting.guild is None

    def test_line_without_guild_or_anonymous_is_dropped(self):
        assert parse_line("[Thu May 25 22:10:50 2023] [60 Warlock] Nobody (Iksar)") is None

    def test_linkdead_without_guild_is_kept(self):
        sighting = parse_line("[Thu May 25 22:10:50 2023] [60 Warlock] Bravado (Iksar) <LINKDEAD>")

        assert sighting is not None
        assert sighting.name == "Bravado"
        assert sighting.guild is None
        assert sighting.level == 60

    def test_status_tags_are_stripped(self):
        sighting = parse_line(
            "[Thu May 25 22:10:50 2023] AFK [60 Warlock] Idler (Iksar) <Ex Astra> LFG"
        )

        assert sighting is not None
        assert sighting.name == "Idler"
        assert sighting.guild == "Ex Astra"
        assert sighting.level == 60

    def test_linkdead_guild_member(self):
        sighting = parse_line(
            "[Thu May 25 22:10:50 2023] [60 Warlock] Dropped (Iksar) <Ex Astra> <LINKDEAD>"
        )

        assert sighting.name == "Dropped"
        assert sighting.guild == "Ex Astra"

    def test_bad_timestamp_falls_back_to_now(self):
        before = datetime.now(timezone.utc)
        sighting = parse_line("[not a date] [60 Warlock] Azrosaurus (Iksar) <Ex Astra>")
        after = datetime.now(timezone.utc)

        assert sighting is not None
        assert before <= sighting.timestamp <= after

    def test_non_numeric_level(self):
        sighting = parse_line("[Thu May 25 22:10:50 2023] [?? Warlock] Azrosaurus (Iksar) <Ex Astra>")

        assert sighting.level is None
        assert sighting.class_name == "Warlock"

    def test_missing_level_bracket_keeps_line(self):
        sighting = parse_line("[Thu May 25 22:10:50 2023] Plain (Human) <Ex Astra>")

        assert sighting is not None
        assert sighting.name == "Plain"
        assert sighting.level is None
        assert sighting.class_name is None

    def test_missing_name_drops_line(self):
        assert parse_line("[Thu May 25 22:10:50 2023] [60 Warlock] <Ex Astra>") is None

    def test_blank_line(self):
        assert parse_line("   ") is None


class TestParseWhoLog:
    def test_preserves_order_and_duplicates(self):
        log = "\n".join([
            "[Thu May 25 22:10:50 2023] Players on EverQuest:",
            "[Thu May 25 22:10:50 2023] ---------------------------",
            "[Thu May 25 22:10:50 2023] [60 Warlock] Azrosaurus (Iksar) <Ex Astra>",
            "",
            "[Thu May 25 22:10:50 2023] [58 Cleric] Healbot (Dwarf) <Ex Astra>",
            "[Thu May 25 22:10:50 2023] [60 Warlock] Azrosaurus (Iksar) <Ex Astra>",
            "[Thu May 25 22:10:50 2023] There are 3 players in Plane of Sky.",
        ])

        sightings = parse_who_log(log)

        assert [s.name for s in sightings] == ["Azrosaurus", "Healbot", "Azrosaurus"]

    def test_empty_input(self):
        assert parse_who_log("") == []
        assert parse_who_log(None) == []


class TestParseTimestamp:
    def test_game_client_format(self):
        assert parse_timestamp("Wed Jul 03 20:16:36 2024") == datetime(2024, 7, 3, 20, 16, 36, tzinfo=timezone.utc)
