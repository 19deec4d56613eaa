"""Tests for parse_locales aggregation."""

import threading

import pytest

from locale_lens.aggregator import parse_locales
from locale_lens.config import LocaleConfig
from locale_lens.events import LocaleParseEvent, RecordingSink
from locale_lens.exceptions import ParsingError
from locale_lens.models import Locale
from locale_lens.scanning.syntax_extractor import LocaleKeyExtractor

EN = """import shared from './common/shared'

export default {
  greeting: 'Hi',
  ...shared,
}
"""
SHARED = "export default { farewell: 'Bye' }\n"
DE = "export default { greeting: 'Hallo', farewell: 'Tschüss' } as const\n"
FR = "export const greeting = 'Salut'\n"


@pytest.fixture
def project(write_files):
    return write_files(
        {
            "src/locales/en.ts": EN,
            "src/locales/de.ts": DE,
            "src/locales/fr.ts": FR,
            "src/locales/common/shared.ts": SHARED,
        }
    )


class TestParseLocales:
    def test_one_locale_per_file_in_discovery_order(self, project):
        config = LocaleConfig(locale_patterns=["src/locales/*.ts"], workers=4)
        sink = RecordingSink()

        locales = parse_locales(sink, root=project, config=config)

        assert [loc.lang for loc in locales] == ["de", "en", "fr"]
        de, en, fr = locales
        assert de.keys == ["greeting", "farewell"]
        assert en.keys == ["greeting", "farewell"]
        assert fr == Locale(lang="fr", locale_keys=[], file_path=str(project / "src/locales/fr.ts"))

    def test_spread_keys_keep_their_source_location(self, project):
        files = [[str(project / "src/locales/en.ts")]]

        (en,) = parse_locales(locale_files=files)

        greeting, farewell = en.locale_keys
        assert greeting.location.start_line == 4
        assert farewell.source_path == str(project / "src/locales/common/shared.ts")
        assert farewell.file_path == str(project / "src/locales/en.ts")

    def test_events(self, project):
        files = [
            [str(project / "src/locales/de.ts"), str(project / "src/locales/fr.ts")],
            [str(project / "src/locales/common/shared.ts")],
        ]
        sink = RecordingSink()

        parse_locales(sink, locale_files=files)

        flat = files[0] + files[1]
        assert sink.events[0] == (LocaleParseEvent.START, flat)
        assert sink.payloads(LocaleParseEvent.START) == [flat]
        parsed = sink.payloads(LocaleParseEvent.PARSED)
        assert sorted(parsed) == sorted(flat)
        assert len(sink.events) == 1 + len(flat)

    def test_start_emitted_before_extraction(self, project):
        seen: list = []

        class OrderCheckingExtractor(LocaleKeyExtractor):
            def extract(self, file_path):
                seen.append(("extract", str(file_path)))
                return super().extract(file_path)

        def sink(event, payload):
            seen.append((event, payload))

        files = [[str(project / "src/locales/de.ts")]]
        parse_locales(sink, locale_files=files, extractor=OrderCheckingExtractor())

        assert seen[0][0] is LocaleParseEvent.START
        assert seen[1] == ("extract", files[0][0])
        assert seen[2] == (LocaleParseEvent.PARSED, files[0][0])

    def test_result_order_independent_of_completion_order(self, project):
        slow_done = threading.Event()
        de_path = str(project / "src/locales/de.ts")
        fr_path = str(project / "src/locales/fr.ts")

        class DelayedExtractor(LocaleKeyExtractor):
            def extract(self, file_path):
                if str(file_path) == de_path:
                    # Finish after fr.ts
                    slow_done.wait(timeout=5)
                result = super().extract(file_path)
                if str(file_path) == fr_path:
                    slow_done.set()
                return result

        sink = RecordingSink()
        locales = parse_locales(
            sink,
            locale_files=[[de_path, fr_path]],
            config=LocaleConfig(workers=2),
            extractor=DelayedExtractor(),
        )

        assert [loc.lang for loc in locales] == ["de", "fr"]
        assert sink.payloads(LocaleParseEvent.PARSED) == [fr_path, de_path]

    def test_empty_discovery(self, tmp_path):
        sink = RecordingSink()

        assert parse_locales(sink, root=tmp_path) == []
        assert sink.events == [(LocaleParseEvent.START, [])]

    def test_parse_error_aborts_everything(self, project):
        broken = project / "src/locales/xx.ts"
        broken.write_text("export default {{{ ]\n", encoding="utf-8")
        files = [[str(project / "src/locales/de.ts"), str(broken)]]
        sink = RecordingSink()

        with pytest.raises(ParsingError):
            parse_locales(sink, locale_files=files, config=LocaleConfig(workers=1))

        assert str(broken) not in sink.payloads(LocaleParseEvent.PARSED)

    def test_works_without_sink(self, project):
        locales = parse_locales(locale_files=[[str(project / "src/locales/de.ts")]])
        assert locales[0].keys == ["greeting", "farewell"]
