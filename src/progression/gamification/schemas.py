"""Pydantic models for the progression engine: catalog entries, stats, snapshot, views."""

from __future__ import annotations

from datetime import date, datetime, timezone
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, field_validator
from pydantic.alias_generators import to_camel

SNAPSHOT_VERSION = 1


class Rarity(str, Enum):
    """Achievement rarity, ordered common -> legendary."""

    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"

    @property
    def priority(self) -> int:
        return list(Rarity).index(self) + 1


class Category(str, Enum):
    EXPLORATION = "exploration"
    INTELLIGENCE = "intelligence"
    BUBBLES = "bubbles"
    CONSTELLATION = "constellation"
    SANCTUM = "sanctum"
    LEARNING = "learning"
    ECONOMY = "economy"
    SOCIAL = "social"
    STREAKS = "streaks"
    SECRET = "secret"


class CustomTag(str, Enum):
    """Every custom-event tag the catalog may reference.

    Tags outside this set are parsed as UNRECOGNIZED and never fire.
    """

    WALLET_CONNECTED = "wallet_connected"
    FIRST_VISIT = "first_visit"
    OWN_WALLET_ANALYZED = "own_wallet_analyzed"
    ALL_PROJECTS_EXPLORED = "all_projects_explored"
    ALL_CATEGORIES_SAMPLED = "all_categories_sampled"
    WHALE_WALLET_ANALYZED = "whale_wallet_analyzed"
    DEFI_HEAVY_WALLET = "defi_heavy_wallet"
    LARGEST_BUBBLE_CLICKED = "largest_bubble_clicked"
    SMALLEST_BUBBLE_CLICKED = "smallest_bubble_clicked"
    LARGE_CLUSTER_FOUND = "large_cluster_found"
    FULLSCREEN_USED = "fullscreen_used"
    TIME_FILTER_30D = "time_filter_30d"
    SPEED_DEPLOY = "speed_deploy"
    ASKED_WHY = "asked_why"
    WARDEN_AUDIT = "warden_audit"
    OXIDE_10_CONVOS = "oxide_10_convos"
    SHADE_50_CONVOS = "shade_50_convos"
    BUILT_CHAIN_SIGNATURES = "built_chain_signatures"
    BUILT_AI_AGENT = "built_ai_agent"
    BUILT_DEFI = "built_defi"
    BUILT_NFT = "built_nft"
    BUILT_MEME = "built_meme"
    BUILT_GAMING = "built_gaming"
    BUILT_INTENTS = "built_intents"
    BUILT_PRIVACY = "built_privacy"
    ALL_SANCTUM_CATEGORIES = "all_sanctum_categories"
    TESTS_GENERATED = "tests_generated"
    MAINNET_DEPLOYED = "mainnet_deployed"
    CONTRACT_OPTIMIZED = "contract_optimized"
    CROSS_CHAIN_DONE = "cross_chain_done"
    RUST_PATH_DONE = "rust_path_done"
    ALL_66_MODULES = "all_66_modules"
    QUICK_START_DONE = "quick_start_done"
    TIER_SPECTER = "tier_specter"
    TIER_LEGION = "tier_legion"
    TIER_LEVIATHAN = "tier_leviathan"
    BETA_USER = "beta_user"
    WEEKEND_ACTIVE = "weekend_active"
    ASKED_THE_PLAN = "asked_the_plan"
    ZERO_BALANCE_WALLET = "zero_balance_wallet"
    FOUND_404 = "found_404"
    DEEP_SCROLL = "deep_scroll"
    KONAMI_CODE = "konami_code"
    UNRECOGNIZED = "unrecognized"

    @classmethod
    def parse(cls, value: str | CustomTag) -> CustomTag:
        try:
            return cls(value)
        except ValueError:
            return cls.UNRECOGNIZED


class NodeStatus(str, Enum):
    LOCKED = "locked"
    AVAILABLE = "available"
    COMPLETED = "completed"


class Track(str, Enum):
    EXPLORER = "explorer"
    BUILDER = "builder"
    HACKER = "hacker"
    FOUNDER = "founder"


class Tier(str, Enum):
    FOUNDATION = "foundation"
    CORE = "core"
    ADVANCED = "advanced"
    MASTERY = "mastery"


# --- Catalog (immutable) ---


class ThresholdTrigger(BaseModel):
    """Satisfied when ``stats[stat] >= threshold`` (flags count as 0 or 1)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["threshold"] = "threshold"
    stat: str
    threshold: int = Field(ge=0)


class CustomTrigger(BaseModel):
    """Satisfied by an external event signal rather than a stat comparison."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["custom"] = "custom"
    name: str

    @property
    def tag(self) -> CustomTag:
        return CustomTag.parse(self.name)


Trigger = Annotated[Union[ThresholdTrigger, CustomTrigger], Field(discriminator="kind")]


class AchievementDef(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str = ""
    description: str = ""
    category: Category
    rarity: Rarity
    xp: int = Field(ge=0)
    secret: bool = False
    hint: str | None = None
    trigger: Trigger | None = None


class SkillNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    label: str = ""
    xp: int = Field(ge=0)
    prerequisites: frozenset[str] = frozenset()
    track: Track | None = None
    tier: Tier | None = None


class Rank(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    min_xp: int = Field(ge=0)
    icon: str = ""


# --- User state ---


class UserStats(BaseModel):
    """Flat record of counters and flags tracked per user.

    Serialized with camelCase keys; unknown keys from older snapshots are dropped.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
        extra="ignore",
    )

    # Exploration
    voids_explored: NonNegativeInt = 0
    unique_categories_explored: NonNegativeInt = 0
    categories_fully_explored: NonNegativeInt = 0
    observatory_visits: NonNegativeInt = 0
    pulse_streams_read: NonNegativeInt = 0
    has_visited: bool = False
    wallet_connected: bool = False

    # Intelligence
    briefs_generated: NonNegativeInt = 0
    opportunities_saved: NonNegativeInt = 0
    wallets_analyzed: NonNegativeInt = 0
    own_wallet_analyzed: bool = False

    # Bubbles
    bubbles_visits: NonNegativeInt = 0
    bubbles_minutes_spent: NonNegativeInt = 0
    bubbles_clicked: NonNegativeInt = 0

    # Constellation
    constellation_visits: NonNegativeInt = 0
    nodes_expanded: NonNegativeInt = 0
    max_depth_reached: NonNegativeInt = 0
    screenshots_taken: NonNegativeInt = 0

    # Sanctum
    sanctum_messages: NonNegativeInt = 0
    code_generations: NonNegativeInt = 0
    contracts_deployed: NonNegativeInt = 0
    contracts_built: NonNegativeInt = 0
    unique_personas_used: NonNegativeInt = 0
    unique_categories_built: NonNegativeInt = 0
    tokens_used: NonNegativeInt = 0
    concepts_learned: NonNegativeInt = 0
    quiz_streak: NonNegativeInt = 0
    max_quiz_streak: NonNegativeInt = 0
    longest_session_minutes: NonNegativeInt = 0
    night_builds: NonNegativeInt = 0

    # Learning
    modules_completed: NonNegativeInt = 0
    explorer_modules: NonNegativeInt = 0
    builder_modules: NonNegativeInt = 0
    hacker_modules: NonNegativeInt = 0
    founder_modules: NonNegativeInt = 0
    certificates_earned: NonNegativeInt = 0
    quick_start_completed: bool = False
    cross_chain_completed: bool = False
    rust_path_completed: bool = False
    all_modules_completed: bool = False

    # Economy
    total_spent: NonNegativeInt = 0
    top_ups_count: NonNegativeInt = 0

    # Social
    profile_shares: NonNegativeInt = 0
    contracts_shared: NonNegativeInt = 0
    referrals: NonNegativeInt = 0

    # Streaks
    current_streak: NonNegativeInt = 0
    longest_streak: NonNegativeInt = 0
    account_age_days: NonNegativeInt = 0
    weekend_active: bool = False

    # Secret triggers
    asked_about_the_plan: bool = False
    analyzed_zero_balance: bool = False
    bubbles_clicked_in_session: NonNegativeInt = 0
    logo_clicks: NonNegativeInt = 0
    konami_entered: bool = False


def stat_field_name(name: str) -> str | None:
    """Resolve a stat given by field name or camelCase alias; None if unknown."""
    if name in UserStats.model_fields:
        return name
    for field_name, info in UserStats.model_fields.items():
        if info.alias == name:
            return field_name
    return None


class TimelineEntry(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    unlocked_at: datetime

    @field_validator("unlocked_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """Naive timestamps are taken to be UTC."""
        return v.replace(tzinfo=timezone.utc) if v.tzinfo is None else v


class ProgressSnapshot(BaseModel):
    """The unit of persistence: everything stored for one user."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    version: int = 0
    stats: UserStats = Field(default_factory=UserStats)
    unlocked: list[str] = Field(default_factory=list)
    completed_nodes: list[str] = Field(default_factory=list)
    featured: list[str] = Field(default_factory=list)
    timeline: list[TimelineEntry] = Field(default_factory=list)
    last_active_date: date | None = None

    @field_validator("unlocked", "completed_nodes", "featured")
    @classmethod
    def dedupe_ids(cls, v: list[str]) -> list[str]:
        """Drop repeated IDs, keeping first occurrence."""
        return list(dict.fromkeys(v))

    @classmethod
    def empty(cls) -> ProgressSnapshot:
        return cls(version=SNAPSHOT_VERSION)


# --- Read views ---


class RankInfo(BaseModel):
    current: Rank
    next: Rank | None = None
    progress: float


class XPBreakdown(BaseModel):
    activity: int
    achievements: int
    skills: int
    streak_bonus: int
    total: int


class ProgressSummary(BaseModel):
    xp: XPBreakdown
    rank: RankInfo
    current_streak: int
    effective_streak: int
    longest_streak: int
    unlocked_count: int
    total_achievements: int


class RarityCount(BaseModel):
    total: int = 0
    unlocked: int = 0


class TrackStats(BaseModel):
    completed: int
    total: int
    earned_xp: int
    total_xp: int
    pct: int
