"""Unit tests for integration_catalog.query — list, search and info."""
from __future__ import annotations

import pytest

from integration_catalog.config import Config
from integration_catalog.errors import InvalidFilterError, UnknownIntegrationError
from integration_catalog.query import (
    PLANNED_HINT,
    SETUP_HINTS,
    QueryEngine,
    integration_info,
    list_integrations,
    search_integrations,
)
from integration_catalog.registry import (
    Catalog,
    IntegrationCategory,
    IntegrationEntry,
    IntegrationStatus,
    all_integrations,
)


def _fixed(status: IntegrationStatus):
    return lambda config: status


def _small_catalog() -> Catalog:
    return Catalog(
        [
            IntegrationEntry("Zulip", "Team chat", IntegrationCategory.CHAT, _fixed(IntegrationStatus.AVAILABLE)),
            IntegrationEntry("Alpha", "First model", IntegrationCategory.AI_MODEL, _fixed(IntegrationStatus.ACTIVE)),
            IntegrationEntry("bravo", "lowercase chat", IntegrationCategory.CHAT, _fixed(IntegrationStatus.COMING_SOON)),
            IntegrationEntry("Charlie", "Second model", IntegrationCategory.AI_MODEL, _fixed(IntegrationStatus.AVAILABLE)),
        ]
    )


# ===========================================================================
# list
# ===========================================================================


class TestList:
    def test_no_filters_returns_every_entry_once(self, default_config: Config) -> None:
        result = list_integrations(default_config)
        names = [view.name for group in result.groups for view in group.integrations]
        assert len(names) == len(all_integrations())
        assert sorted(names) == sorted(e.name for e in all_integrations())
        assert len(result) == len(all_integrations())

    def test_groups_follow_category_order(self, default_config: Config) -> None:
        result = list_integrations(default_config)
        order = [group.category for group in result.groups]
        assert order == list(IntegrationCategory.all())

    def test_entries_keep_catalog_order(self, default_config: Config) -> None:
        result = list_integrations(default_config)
        for group in result.groups:
            expected = [e.name for e in all_integrations() if e.category is group.category]
            assert [view.name for view in group.integrations] == expected

    def test_grouping_with_interleaved_catalog(self) -> None:
        result = QueryEngine(Config(), _small_catalog()).list()
        assert [g.category for g in result.groups] == [
            IntegrationCategory.CHAT,
            IntegrationCategory.AI_MODEL,
        ]
        assert [v.name for v in result.groups[0].integrations] == ["Zulip", "bravo"]
        assert [v.name for v in result.groups[1].integrations] == ["Alpha", "Charlie"]

    def test_category_filter(self, default_config: Config) -> None:
        result = list_integrations(default_config, category="ai")
        assert [g.category for g in result.groups] == [IntegrationCategory.AI_MODEL]
        assert all(v.category is IntegrationCategory.AI_MODEL for v in result.groups[0].integrations)
        expected = [e.name for e in all_integrations() if e.category is IntegrationCategory.AI_MODEL]
        assert [v.name for v in result.groups[0].integrations] == expected

    def test_status_filter(self, default_config: Config) -> None:
        result = list_integrations(default_config, status="coming-soon")
        views = [v for g in result.groups for v in g.integrations]
        assert views
        assert all(v.status is IntegrationStatus.COMING_SOON for v in views)

    def test_filters_combine_with_and(self, telegram_config: Config) -> None:
        result = list_integrations(telegram_config, category="chat", status="active")
        views = [v for g in result.groups for v in g.integrations]
        assert [v.name for v in views] == ["Telegram"]

    def test_status_filter_uses_given_config(
        self, default_config: Config, telegram_config: Config
    ) -> None:
        before = list_integrations(default_config, category="chat", status="enabled")
        after = list_integrations(telegram_config, category="chat", status="enabled")
        assert before.is_empty
        assert not after.is_empty

    def test_empty_result_is_not_an_error(self) -> None:
        result = QueryEngine(Config(), _small_catalog()).list(category="social")
        assert result.is_empty
        assert len(result) == 0
        assert result.groups == ()

    def test_invalid_category(self, default_config: Config) -> None:
        with pytest.raises(InvalidFilterError) as exc_info:
            list_integrations(default_config, category="bogus")
        assert len(exc_info.value.valid_options) == 9

    def test_invalid_status_fails_even_with_valid_category(self, default_config: Config) -> None:
        with pytest.raises(InvalidFilterError) as exc_info:
            list_integrations(default_config, category="chat", status="sometimes")
        assert exc_info.value.kind == "status"

    def test_invalid_filter_evaluates_no_status(self) -> None:
        calls: list[str] = []

        def tracking(config: Config) -> IntegrationStatus:
            calls.append("called")
            return IntegrationStatus.AVAILABLE

        catalog = Catalog([IntegrationEntry("Only", "x", IntegrationCategory.CHAT, tracking)])
        with pytest.raises(InvalidFilterError):
            QueryEngine(Config(), catalog).list(category="chat", status="nope")
        assert calls == []

    def test_result_iterates_groups(self, default_config: Config) -> None:
        result = list_integrations(default_config, category="social")
        assert [g.category for g in result] == [IntegrationCategory.SOCIAL]


# ===========================================================================
# search
# ===========================================================================


class TestSearch:
    def test_empty_query_returns_everything_sorted(self, default_config: Config) -> None:
        result = search_integrations(default_config, "")
        names = [v.name for v in result.matches]
        assert len(names) == len(all_integrations())
        assert names == sorted(e.name for e in all_integrations())

    def test_sort_is_ordinal(self) -> None:
        result = QueryEngine(Config(), _small_catalog()).search("")
        assert [v.name for v in result] == ["Alpha", "Charlie", "Zulip", "bravo"]

    def test_matches_name_case_insensitively(self, default_config: Config) -> None:
        result = search_integrations(default_config, "tele")
        assert "Telegram" in [v.name for v in result.matches]

    def test_matches_description(self) -> None:
        result = QueryEngine(Config(), _small_catalog()).search("MODEL")
        assert [v.name for v in result] == ["Alpha", "Charlie"]

    def test_no_match_is_empty_success(self, default_config: Config) -> None:
        result = search_integrations(default_config, "xyznonexistent123")
        assert result.is_empty
        assert result.query == "xyznonexistent123"

    def test_category_filter(self) -> None:
        result = QueryEngine(Config(), _small_catalog()).search("", category="llm")
        assert [v.name for v in result] == ["Alpha", "Charlie"]

    def test_status_filter(self) -> None:
        result = QueryEngine(Config(), _small_catalog()).search("chat", status="planned")
        assert [v.name for v in result] == ["bravo"]

    def test_invalid_filter(self, default_config: Config) -> None:
        with pytest.raises(InvalidFilterError):
            search_integrations(default_config, "tele", category="invalid-category")

    def test_carries_status(self, telegram_config: Config) -> None:
        result = search_integrations(telegram_config, "telegram")
        telegram = next(v for v in result if v.name == "Telegram")
        assert telegram.status is IntegrationStatus.ACTIVE


# ===========================================================================
# info
# ===========================================================================


class TestInfo:
    def test_case_insensitive(self, default_config: Config) -> None:
        detail = integration_info(default_config, "telegram")
        assert detail.entry.name == "Telegram"
        assert detail.status is IntegrationStatus.AVAILABLE

    def test_first_entry_lowercased(self, default_config: Config) -> None:
        first = all_integrations()[0]
        detail = integration_info(default_config, first.name.lower())
        assert detail.entry is first

    def test_exact_not_substring(self, default_config: Config) -> None:
        with pytest.raises(UnknownIntegrationError) as exc_info:
            integration_info(default_config, "tele")
        assert exc_info.value.input == "tele"

    def test_unknown_message(self, default_config: Config) -> None:
        with pytest.raises(UnknownIntegrationError) as exc_info:
            integration_info(default_config, "definitely-not-a-real-integration")
        message = str(exc_info.value)
        assert message.startswith("Unknown integration: definitely-not-a-real-integration.")
        assert "zeroclaw onboard --interactive" in message

    def test_unknown_is_lookup_error(self, default_config: Config) -> None:
        with pytest.raises(LookupError):
            integration_info(default_config, "nope")

    def test_specific_hint(self, default_config: Config) -> None:
        detail = integration_info(default_config, "TELEGRAM")
        assert detail.setup_hint is SETUP_HINTS["Telegram"]
        assert detail.setup_hint.heading == "Setup:"
        assert any("@BotFather" in line for line in detail.setup_hint.lines)

    def test_built_in_hint(self, default_config: Config) -> None:
        detail = integration_info(default_config, "cron")
        assert detail.setup_hint is not None
        assert detail.setup_hint.heading == "Built-in:"

    def test_specific_hint_wins_over_planned(self, default_config: Config) -> None:
        detail = integration_info(default_config, "github")
        assert detail.status is IntegrationStatus.COMING_SOON
        assert detail.setup_hint is SETUP_HINTS["GitHub"]

    def test_planned_hint_for_coming_soon(self, default_config: Config) -> None:
        detail = integration_info(default_config, "spotify")
        assert detail.status is IntegrationStatus.COMING_SOON
        assert detail.setup_hint is PLANNED_HINT

    def test_no_hint_for_available_without_specific_hint(self, default_config: Config) -> None:
        detail = integration_info(default_config, "anthropic")
        assert detail.status is IntegrationStatus.AVAILABLE
        assert detail.setup_hint is None

    def test_hint_keys_exist_in_catalog(self) -> None:
        names = {e.name for e in all_integrations()}
        assert set(SETUP_HINTS) <= names

    def test_hint_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            SETUP_HINTS["Telegram"] = PLANNED_HINT  # type: ignore[index]


# ===========================================================================
# QueryEngine
# ===========================================================================


class TestQueryEngine:
    def test_defaults_to_builtin_catalog(self, default_config: Config) -> None:
        engine = QueryEngine(default_config)
        assert engine.catalog.entries is all_integrations()

    def test_custom_catalog(self) -> None:
        catalog = _small_catalog()
        assert QueryEngine(Config(), catalog).catalog is catalog
