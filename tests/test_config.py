"""Tests for configuration loading and factory functions."""

from pathlib import Path
from tempfile import NamedTemporaryFile

import pydantic
import pytest

from sollagarathi.config import (
    GoogleSuggesterConfig,
    MemoryStoreConfig,
    ResolverConfig,
    ScrapedSourceConfig,
    SollagarathiConfig,
    SQLiteStoreConfig,
    StaticSuggesterConfig,
    WiktionarySourceConfig,
    create_from_config,
    get_default_config_path,
    load_config,
)
from sollagarathi.config.factory import (
    DB_PATH_ENV_VAR,
    create_adapter,
    create_policy,
    create_store,
    create_suggester,
)
from sollagarathi.config.loader import CONFIG_PATH_ENV_VAR
from sollagarathi.policy import ResolutionMode
from sollagarathi.resolver import WordResolver
from sollagarathi.sources import LocalStoreAdapter, ScrapedPageAdapter, WiktionaryAdapter
from sollagarathi.store import InMemoryLexiconStore, SQLiteLexiconStore
from sollagarathi.suggest import GoogleTransliterator, StaticConceptSuggester
from sollagarathi.trace_logger import ResolutionLogger


def _load_yaml(content: str) -> SollagarathiConfig:
    with NamedTemporaryFile(mode="w", suffix=".yaml", encoding="utf-8", delete=False) as f:
        f.write(content)
        f.flush()
        return load_config(Path(f.name))


class TestConfigModels:
    """Tests for Pydantic config models."""

    def test_resolver_config_defaults(self) -> None:
        config = ResolverConfig()
        assert config.mode is ResolutionMode.FIRST_MATCH
        assert config.timeout_seconds == 4.0

    def test_resolver_timeout_must_be_positive(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            ResolverConfig(timeout_seconds=0)

    def test_wiktionary_config_defaults(self) -> None:
        config = WiktionarySourceConfig()
        assert config.type == "wiktionary"
        assert config.api_url == "https://ta.wiktionary.org/w/api.php"

    def test_scraped_config_requires_placeholder(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            ScrapedSourceConfig(name="x", url_template="https://example.org/")

    def test_root_config_defaults(self) -> None:
        config = SollagarathiConfig()
        assert isinstance(config.store, MemoryStoreConfig)
        assert [s.type for s in config.sources] == ["wiktionary", "scraped", "scraped"]
        scraped = [s for s in config.sources if isinstance(s, ScrapedSourceConfig)]
        assert sorted(s.min_length for s in scraped) == [500, 1000]
        assert [s.type for s in config.suggesters] == ["static", "google"]
        assert config.logging.trace_enabled is False


class TestConfigLoader:
    """Tests for YAML config loading."""

    def test_load_config(self) -> None:
        config = _load_yaml(
            """
store:
  type: sqlite
  path: /tmp/lexicon.db
resolver:
  mode: aggregate
  timeout_seconds: 2.5
sources:
  - type: scraped
    name: Agarathi
    url_template: "https://agarathi.com/word/{query}"
    min_length: 500
    description: "அகராதி.காம் தளத்தில் காண்க"
suggesters:
  - type: static
    concepts:
      book: [நூல்]
"""
        )

        assert isinstance(config.store, SQLiteStoreConfig)
        assert config.resolver.mode is ResolutionMode.AGGREGATE
        assert config.resolver.timeout_seconds == 2.5
        assert len(config.sources) == 1
        source = config.sources[0]
        assert isinstance(source, ScrapedSourceConfig)
        assert source.description == "அகராதி.காம் தளத்தில் காண்க"
        suggester = config.suggesters[0]
        assert isinstance(suggester, StaticSuggesterConfig)
        assert suggester.concepts == {"book": ["நூல்"]}

    def test_load_empty_config_uses_defaults(self) -> None:
        config = _load_yaml("")
        assert config == SollagarathiConfig()

    def test_load_config_rejects_unknown_source(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            _load_yaml("sources:\n  - type: bing\n")

    def test_get_default_config_path(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(CONFIG_PATH_ENV_VAR, raising=False)
        path = get_default_config_path()
        assert path.name == "default.yaml"
        assert path.parent.name == "configs"

    def test_default_config_path_env_override(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv(CONFIG_PATH_ENV_VAR, str(tmp_path / "site.yaml"))
        assert get_default_config_path() == tmp_path / "site.yaml"

    def test_load_default_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(CONFIG_PATH_ENV_VAR, raising=False)
        path = get_default_config_path()
        if path.exists():
            config = load_config(path)
            assert isinstance(config, SollagarathiConfig)
            assert isinstance(config.store, SQLiteStoreConfig)


class TestFactoryFunctions:
    """Tests for component factory functions."""

    def test_create_store_memory(self) -> None:
        store = create_store(MemoryStoreConfig(entries={"அறம்": "virtue"}))
        assert isinstance(store, InMemoryLexiconStore)

    async def test_create_store_sqlite_env_override(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        db_path = tmp_path / "override.db"
        monkeypatch.setenv(DB_PATH_ENV_VAR, str(db_path))

        store = create_store(SQLiteStoreConfig(path=str(tmp_path / "ignored.db")))
        await store.close()

        assert isinstance(store, SQLiteLexiconStore)
        assert store.db_path == str(db_path)
        assert db_path.exists()

    def test_create_adapter_wiktionary(self) -> None:
        adapter = create_adapter(WiktionarySourceConfig(), timeout=1.0)
        assert isinstance(adapter, WiktionaryAdapter)

    def test_create_adapter_scraped(self) -> None:
        config = ScrapedSourceConfig(name="X", url_template="https://x/{query}", min_length=10)
        adapter = create_adapter(config, timeout=1.0)
        assert isinstance(adapter, ScrapedPageAdapter)
        assert adapter.name == "X"

    def test_create_suggesters(self) -> None:
        static = create_suggester(StaticSuggesterConfig(), timeout=1.0)
        google = create_suggester(GoogleSuggesterConfig(), timeout=1.0)
        assert isinstance(static, StaticConceptSuggester)
        assert isinstance(google, GoogleTransliterator)

    def test_create_policy_puts_local_store_first(self) -> None:
        config = SollagarathiConfig()
        policy = create_policy(config, InMemoryLexiconStore())
        assert isinstance(policy.adapters[0], LocalStoreAdapter)
        assert [a.name for a in policy.adapters[1:]] == ["Wiktionary", "TamilLexicon", "Agarathi"]

    def test_create_policy_mode_override(self) -> None:
        policy = create_policy(
            SollagarathiConfig(), InMemoryLexiconStore(), mode_override=ResolutionMode.AGGREGATE
        )
        assert policy.mode is ResolutionMode.AGGREGATE

    def test_create_from_config(self) -> None:
        resolver, resolution_logger = create_from_config(SollagarathiConfig())
        assert isinstance(resolver, WordResolver)
        assert resolution_logger is None

    def test_create_from_config_trace_override(self, tmp_path: Path) -> None:
        _, resolution_logger = create_from_config(
            SollagarathiConfig(), trace_override=True, log_dir_override=str(tmp_path)
        )
        assert isinstance(resolution_logger, ResolutionLogger)
        assert resolution_logger.enabled
