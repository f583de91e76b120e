from unittest.mock import MagicMock

import pytest
from celery.exceptions import SoftTimeLimitExceeded

from src.constants import SUPPORTED_LANGUAGES
from src.schemas.translation import TranslationOutcome, TranslationTarget
from src.services.orchestrator import BatchOrchestrator
from src.services.throttle import Throttle
from src.services.translation import LanguageTranslator
from tests.conftest import (
    FRENCH,
    SOURCE_TEXT,
    SPANISH,
    FakeClock,
    StubProvider,
    full_primary_translations,
    make_translator,
)

TWO_TARGETS = (FRENCH, SPANISH)


class TestTranslateAll:
    def test_primary_and_secondary_mix(self) -> None:
        translator, _, secondary = make_translator(
            primary={"French": "Bienvenue dans notre restaurant"},
            secondary={"es": "Bienvenido a nuestro restaurante"},
        )
        orchestrator = BatchOrchestrator(translator=translator)

        result = orchestrator.translate_all(SOURCE_TEXT, TWO_TARGETS)

        assert result.translations == {
            "description_fr": "Bienvenue dans notre restaurant",
            "description_es": "Bienvenido a nuestro restaurante",
        }
        assert [o.provider_used for o in result.outcomes] == ["primary", "secondary"]
        assert secondary.calls == [(SOURCE_TEXT, "es")]

    def test_both_providers_fail_uses_original_text(self) -> None:
        translator, _, _ = make_translator(primary={"French": "Bienvenue dans notre restaurant"})
        orchestrator = BatchOrchestrator(translator=translator)

        result = orchestrator.translate_all(SOURCE_TEXT, TWO_TARGETS)

        assert result.translations["description_es"] == "Welcome to our restaurant"
        spanish = result.outcomes[1]
        assert spanish.provider_used == "original"
        assert spanish.succeeded is False
        assert result.outcomes[0].succeeded is True

    def test_every_target_present_even_on_total_failure(self) -> None:
        translator, _, _ = make_translator()
        orchestrator = BatchOrchestrator(translator=translator)

        result = orchestrator.translate_all(SOURCE_TEXT, SUPPORTED_LANGUAGES)

        assert set(result.translations) == {t.storage_field for t in SUPPORTED_LANGUAGES}
        assert all(text == SOURCE_TEXT for text in result.translations.values())
        assert not any(o.succeeded for o in result.outcomes)

    def test_targets_translated_in_configured_order(self) -> None:
        translator, primary, _ = make_translator(
            primary=full_primary_translations(SUPPORTED_LANGUAGES)
        )
        orchestrator = BatchOrchestrator(translator=translator)

        result = orchestrator.translate_all(SOURCE_TEXT, SUPPORTED_LANGUAGES)

        expected = [t.language_name for t in SUPPORTED_LANGUAGES]
        assert [language for _, language in primary.calls] == expected
        assert [o.target for o in result.outcomes] == list(SUPPORTED_LANGUAGES)
        assert list(result.translations) == [t.storage_field for t in SUPPORTED_LANGUAGES]

    def test_unexpected_error_does_not_abort_remaining_targets(self) -> None:
        translator = MagicMock(spec=LanguageTranslator)

        def translate(text: str, target: TranslationTarget) -> TranslationOutcome:
            if target == SPANISH:
                raise RuntimeError("programming error")
            return TranslationOutcome(
                target=target,
                text=f"ok-{target.language_code}",
                provider_used="primary",
                succeeded=True,
            )

        translator.translate.side_effect = translate
        orchestrator = BatchOrchestrator(translator=translator)

        result = orchestrator.translate_all(SOURCE_TEXT, SUPPORTED_LANGUAGES)

        assert translator.translate.call_count == len(SUPPORTED_LANGUAGES)
        assert result.translations["description_es"] == SOURCE_TEXT
        assert result.outcomes[1].provider_used == "original"
        assert result.translations["description_de"] == "ok-de"
        assert result.translations["description_th"] == "ok-th"

    def test_throttle_spaces_each_target(self) -> None:
        clock = FakeClock()
        throttle = Throttle(min_interval=0.2, clock=clock, sleep=clock.sleep)
        translator, _, _ = make_translator(primary=full_primary_translations(SUPPORTED_LANGUAGES))
        orchestrator = BatchOrchestrator(translator=translator, throttle=throttle)

        orchestrator.translate_all(SOURCE_TEXT, SUPPORTED_LANGUAGES)

        assert len(clock.sleeps) == len(SUPPORTED_LANGUAGES) - 1
        assert all(s == pytest.approx(0.2) for s in clock.sleeps)

    def test_throttle_failure_is_contained(self) -> None:
        throttle = MagicMock(spec=Throttle)
        throttle.wait.side_effect = [RuntimeError("clock broke"), 0.0]
        translator, _, _ = make_translator(primary={"Spanish": "Bienvenido"})
        orchestrator = BatchOrchestrator(translator=translator, throttle=throttle)

        result = orchestrator.translate_all(SOURCE_TEXT, TWO_TARGETS)

        assert result.translations == {
            "description_fr": SOURCE_TEXT,
            "description_es": "Bienvenido",
        }

    def test_soft_time_limit_aborts_batch(self) -> None:
        primary = StubProvider("stub-primary", error=SoftTimeLimitExceeded())
        secondary = StubProvider("stub-secondary")
        orchestrator = BatchOrchestrator(translator=LanguageTranslator(primary, secondary))

        with pytest.raises(SoftTimeLimitExceeded):
            orchestrator.translate_all(SOURCE_TEXT, SUPPORTED_LANGUAGES)

        assert len(primary.calls) == 1
        assert secondary.calls == []

    @pytest.mark.parametrize("text", ["", "   "])
    def test_empty_text_raises(self, text: str) -> None:
        translator, primary, _ = make_translator()
        orchestrator = BatchOrchestrator(translator=translator)

        with pytest.raises(ValueError):
            orchestrator.translate_all(text, TWO_TARGETS)

        assert primary.calls == []


class TestTranslateOne:
    def test_single_target(self) -> None:
        translator, _, _ = make_translator(secondary={"fr": "Bienvenue"})
        orchestrator = BatchOrchestrator(translator=translator)

        result = orchestrator.translate_one(SOURCE_TEXT, FRENCH)

        assert result.translations == {"description_fr": "Bienvenue"}
        assert result.outcomes[0].provider_used == "secondary"

    def test_single_target_contains_unexpected_error(self) -> None:
        primary = StubProvider("broken", error=ZeroDivisionError())
        translator = LanguageTranslator(primary, StubProvider("stub-secondary"))
        orchestrator = BatchOrchestrator(translator=translator)

        result = orchestrator.translate_one(SOURCE_TEXT, FRENCH)

        assert result.translations == {"description_fr": SOURCE_TEXT}
        assert result.outcomes[0].succeeded is False
