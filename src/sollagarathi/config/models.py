"""Pydantic configuration models for Sollagarathi components."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field, field_validator

from sollagarathi.policy import DEFAULT_ADAPTER_TIMEOUT, ResolutionMode

# ============================================================
# Store Configs
# ============================================================


class MemoryStoreConfig(BaseModel):
    """Configuration for the in-process store."""

    type: Literal["memory"] = "memory"
    entries: dict[str, str] = Field(default_factory=dict)

    model_config = {"frozen": True}


class SQLiteStoreConfig(BaseModel):
    """Configuration for the SQLite store."""

    type: Literal["sqlite"] = "sqlite"
    path: str = "data/sollagarathi.db"

    model_config = {"frozen": True}


StoreConfig = Annotated[
    MemoryStoreConfig | SQLiteStoreConfig,
    Field(discriminator="type"),
]


# ============================================================
# Source Configs
# ============================================================


class WiktionarySourceConfig(BaseModel):
    """Configuration for WiktionaryAdapter."""

    type: Literal["wiktionary"] = "wiktionary"
    name: str = "Wiktionary"
    label: str = "விக்சனரி (Wiktionary)"
    api_url: str = "https://ta.wiktionary.org/w/api.php"

    model_config = {"frozen": True}


class ScrapedSourceConfig(BaseModel):
    """Configuration for a ScrapedPageAdapter."""

    type: Literal["scraped"] = "scraped"
    name: str
    url_template: str
    min_length: int = 500
    label: str | None = None
    description: str | None = None

    model_config = {"frozen": True}

    @field_validator("url_template")
    @classmethod
    def template_has_placeholder(cls, v: str) -> str:
        if "{query}" not in v:
            raise ValueError("url_template must contain a {query} placeholder")
        return v


SourceConfig = Annotated[
    WiktionarySourceConfig | ScrapedSourceConfig,
    Field(discriminator="type"),
]


def _default_sources() -> list[WiktionarySourceConfig | ScrapedSourceConfig]:
    return [
        WiktionarySourceConfig(),
        ScrapedSourceConfig(
            name="TamilLexicon",
            label="தமிழ்ப் பேரகராதி (Madras University Tamil Lexicon)",
            url_template=(
                "https://dsal.uchicago.edu/cgi-bin/app/tamil-lex_query.py"
                "?qs={query}&searchhws=yes&matchtype=exact"
            ),
            min_length=1000,
            description="சென்னைப் பல்கலைக்கழகத் தமிழ்ப் பேரகராதியில் இச்சொல்லைக் காண்க",
        ),
        ScrapedSourceConfig(
            name="Agarathi",
            label="அகராதி.காம் (agarathi.com)",
            url_template="https://agarathi.com/word/{query}",
            min_length=500,
            description="அகராதி.காம் தளத்தில் இச்சொல்லைக் காண்க",
        ),
    ]


# ============================================================
# Suggester Configs
# ============================================================


class StaticSuggesterConfig(BaseModel):
    """Configuration for StaticConceptSuggester."""

    type: Literal["static"] = "static"
    concepts: dict[str, list[str]] | None = None

    model_config = {"frozen": True}


class GoogleSuggesterConfig(BaseModel):
    """Configuration for GoogleTransliterator."""

    type: Literal["google"] = "google"
    num_candidates: int = 5
    input_tool: str = "ta-t-i0-und"

    model_config = {"frozen": True}


SuggesterConfig = Annotated[
    StaticSuggesterConfig | GoogleSuggesterConfig,
    Field(discriminator="type"),
]


# ============================================================
# Resolver Config
# ============================================================


class ResolverConfig(BaseModel):
    """Configuration for the resolution policy."""

    mode: ResolutionMode = ResolutionMode.FIRST_MATCH
    timeout_seconds: float = Field(default=DEFAULT_ADAPTER_TIMEOUT, gt=0)

    model_config = {"frozen": True}


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for log level and per-resolution trace files."""

    level: str = "INFO"
    trace_enabled: bool = False
    log_dir: str = "logs"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class SollagarathiConfig(BaseModel):
    """Root configuration for Sollagarathi."""

    store: StoreConfig = Field(default_factory=MemoryStoreConfig)
    resolver: ResolverConfig = Field(default_factory=ResolverConfig)
    sources: list[SourceConfig] = Field(default_factory=_default_sources)
    suggesters: list[SuggesterConfig] = Field(
        default_factory=lambda: [StaticSuggesterConfig(), GoogleSuggesterConfig()]
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
