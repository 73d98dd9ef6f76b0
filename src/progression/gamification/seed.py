"""Production catalog: achievements and the skill constellation.

Stat names refer to ``UserStats`` fields; custom triggers refer to ``CustomTag`` values.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from progression.gamification.registry import Registry
from progression.gamification.schemas import (
    AchievementDef,
    CustomTrigger,
    SkillNode,
    ThresholdTrigger,
)

logger = logging.getLogger(__name__)

ACHIEVEMENT_SEED_DATA: list[dict] = [
    # Exploration
    {"id": "first_steps", "name": "First Steps", "category": "exploration", "rarity": "common", "xp": 10, "custom": "wallet_connected"},
    {"id": "void_walker", "name": "Void Walker", "category": "exploration", "rarity": "common", "xp": 15, "stat": "voids_explored", "threshold": 1},
    {"id": "void_hunter", "name": "Void Hunter", "category": "exploration", "rarity": "uncommon", "xp": 50, "stat": "voids_explored", "threshold": 10},
    {"id": "void_cartographer", "name": "Void Cartographer", "category": "exploration", "rarity": "rare", "xp": 150, "stat": "voids_explored", "threshold": 50},
    {"id": "void_archaeologist", "name": "Void Archaeologist", "category": "exploration", "rarity": "epic", "xp": 300, "stat": "voids_explored", "threshold": 100},
    {"id": "seen_everything", "name": "I've Seen Everything", "category": "exploration", "rarity": "legendary", "xp": 1000, "custom": "all_projects_explored"},
    {"id": "category_sampler", "name": "Category Sampler", "category": "exploration", "rarity": "uncommon", "xp": 50, "stat": "unique_categories_explored", "threshold": 5},
    {"id": "category_completionist", "name": "Category Completionist", "category": "exploration", "rarity": "rare", "xp": 200, "stat": "categories_fully_explored", "threshold": 1},
    {"id": "master_taxonomist", "name": "Master Taxonomist", "category": "exploration", "rarity": "epic", "xp": 500, "custom": "all_categories_sampled"},
    {"id": "observatory_regular", "name": "Observatory Regular", "category": "exploration", "rarity": "common", "xp": 30, "stat": "observatory_visits", "threshold": 10},
    {"id": "signal_watcher", "name": "Signal Watcher", "category": "exploration", "rarity": "common", "xp": 25, "stat": "pulse_streams_read", "threshold": 5},
    {"id": "pulse_junkie", "name": "Pulse Junkie", "category": "exploration", "rarity": "rare", "xp": 100, "stat": "pulse_streams_read", "threshold": 50},
    # Intelligence
    {"id": "intel_gatherer", "name": "Intel Gatherer", "category": "intelligence", "rarity": "common", "xp": 25, "stat": "briefs_generated", "threshold": 1},
    {"id": "brief_collector", "name": "Brief Collector", "category": "intelligence", "rarity": "uncommon", "xp": 50, "stat": "briefs_generated", "threshold": 5},
    {"id": "intelligence_officer", "name": "Intelligence Officer", "category": "intelligence", "rarity": "rare", "xp": 150, "stat": "briefs_generated", "threshold": 25},
    {"id": "spymaster", "name": "Spymaster", "category": "intelligence", "rarity": "epic", "xp": 400, "stat": "briefs_generated", "threshold": 100},
    {"id": "opportunity_spotter", "name": "Opportunity Spotter", "category": "intelligence", "rarity": "common", "xp": 15, "stat": "opportunities_saved", "threshold": 1},
    {"id": "mission_board", "name": "Mission Board", "category": "intelligence", "rarity": "rare", "xp": 75, "stat": "opportunities_saved", "threshold": 10},
    {"id": "lens_initiate", "name": "Lens Initiate", "category": "intelligence", "rarity": "common", "xp": 25, "stat": "wallets_analyzed", "threshold": 1},
    {"id": "wallet_whisperer", "name": "Wallet Whisperer", "category": "intelligence", "rarity": "rare", "xp": 100, "stat": "wallets_analyzed", "threshold": 10},
    {"id": "reputation_oracle", "name": "Reputation Oracle", "category": "intelligence", "rarity": "epic", "xp": 250, "stat": "wallets_analyzed", "threshold": 50},
    {"id": "whale_watcher", "name": "Whale Watcher", "category": "intelligence", "rarity": "rare", "xp": 100, "custom": "whale_wallet_analyzed"},
    {"id": "self_aware", "name": "Self-Aware", "category": "intelligence", "rarity": "common", "xp": 30, "custom": "own_wallet_analyzed"},
    {"id": "defi_detective", "name": "DeFi Detective", "category": "intelligence", "rarity": "rare", "xp": 75, "custom": "defi_heavy_wallet"},
    # Bubbles
    {"id": "bubble_popper", "name": "Bubble Popper", "category": "bubbles", "rarity": "common", "xp": 10, "stat": "bubbles_visits", "threshold": 1},
    {"id": "market_gazer", "name": "Market Gazer", "category": "bubbles", "rarity": "uncommon", "xp": 25, "stat": "bubbles_minutes_spent", "threshold": 5},
    {"id": "bubble_surfer", "name": "Bubble Surfer", "category": "bubbles", "rarity": "rare", "xp": 75, "stat": "bubbles_clicked", "threshold": 20},
    {"id": "the_bigger_they_are", "name": "The Bigger They Are", "category": "bubbles", "rarity": "common", "xp": 15, "custom": "largest_bubble_clicked"},
    {"id": "micro_hunter", "name": "Micro Hunter", "category": "bubbles", "rarity": "rare", "xp": 50, "custom": "smallest_bubble_clicked"},
    # Constellation
    {"id": "constellation_gazer", "name": "Constellation Gazer", "category": "constellation", "rarity": "common", "xp": 15, "stat": "constellation_visits", "threshold": 1},
    {"id": "web_weaver", "name": "Web Weaver", "category": "constellation", "rarity": "uncommon", "xp": 30, "stat": "nodes_expanded", "threshold": 5},
    {"id": "deep_diver", "name": "Deep Diver", "category": "constellation", "rarity": "rare", "xp": 75, "stat": "max_depth_reached", "threshold": 4},
    {"id": "cluster_finder", "name": "Cluster Finder", "category": "constellation", "rarity": "rare", "xp": 100, "custom": "large_cluster_found"},
    {"id": "cartographer_screenshot", "name": "Cartographer", "category": "constellation", "rarity": "common", "xp": 20, "stat": "screenshots_taken", "threshold": 1},
    {"id": "fullscreen_commander", "name": "Fullscreen Commander", "category": "constellation", "rarity": "common", "xp": 10, "custom": "fullscreen_used"},
    {"id": "time_traveler", "name": "Time Traveler", "category": "constellation", "rarity": "rare", "xp": 50, "custom": "time_filter_30d"},
    {"id": "six_degrees", "name": "Six Degrees", "category": "constellation", "rarity": "legendary", "xp": 500, "stat": "max_depth_reached", "threshold": 6},
    # Sanctum
    {"id": "hello_sanctum", "name": "Hello, Sanctum!", "category": "sanctum", "rarity": "common", "xp": 10, "stat": "sanctum_messages", "threshold": 1},
    {"id": "code_conjurer", "name": "Code Conjurer", "category": "sanctum", "rarity": "common", "xp": 25, "stat": "code_generations", "threshold": 1},
    {"id": "genesis_deploy", "name": "Genesis Deploy", "category": "sanctum", "rarity": "rare", "xp": 100, "stat": "contracts_deployed", "threshold": 1},
    {"id": "speed_demon", "name": "Speed Demon", "category": "sanctum", "rarity": "legendary", "xp": 500, "custom": "speed_deploy"},
    {"id": "contract_factory", "name": "Contract Factory", "category": "sanctum", "rarity": "rare", "xp": 100, "stat": "contracts_built", "threshold": 3},
    {"id": "mass_production", "name": "Mass Production", "category": "sanctum", "rarity": "epic", "xp": 250, "stat": "contracts_built", "threshold": 10},
    {"id": "assembly_line", "name": "Assembly Line", "category": "sanctum", "rarity": "legendary", "xp": 750, "stat": "contracts_built", "threshold": 25},
    {"id": "curious_mind", "name": "Curious Mind", "category": "sanctum", "rarity": "common", "xp": 25, "custom": "asked_why"},
    {"id": "security_minded", "name": "Security Minded", "category": "sanctum", "rarity": "rare", "xp": 75, "custom": "warden_audit"},
    {"id": "council_awaits", "name": "The Council Awaits", "category": "sanctum", "rarity": "rare", "xp": 100, "stat": "unique_personas_used", "threshold": 3},
    {"id": "council_completionist", "name": "Council Completionist", "category": "sanctum", "rarity": "epic", "xp": 300, "stat": "unique_personas_used", "threshold": 8},
    {"id": "oxide_apprentice", "name": "Oxide Apprentice", "category": "sanctum", "rarity": "rare", "xp": 100, "custom": "oxide_10_convos"},
    {"id": "shades_favorite", "name": "Shade's Favorite", "category": "sanctum", "rarity": "epic", "xp": 200, "custom": "shade_50_convos"},
    {"id": "chain_master", "name": "Chain Master", "category": "sanctum", "rarity": "epic", "xp": 150, "custom": "built_chain_signatures"},
    {"id": "agent_smith", "name": "Agent Smith", "category": "sanctum", "rarity": "epic", "xp": 200, "custom": "built_ai_agent"},
    {"id": "defi_architect", "name": "DeFi Architect", "category": "sanctum", "rarity": "rare", "xp": 100, "custom": "built_defi"},
    {"id": "nft_creator", "name": "NFT Creator", "category": "sanctum", "rarity": "rare", "xp": 100, "custom": "built_nft"},
    {"id": "meme_lord", "name": "Meme Lord", "category": "sanctum", "rarity": "rare", "xp": 100, "custom": "built_meme"},
    {"id": "game_designer", "name": "Game Designer", "category": "sanctum", "rarity": "rare", "xp": 100, "custom": "built_gaming"},
    {"id": "intent_weaver", "name": "Intent Weaver", "category": "sanctum", "rarity": "epic", "xp": 150, "custom": "built_intents"},
    {"id": "privacy_phantom", "name": "Privacy Phantom", "category": "sanctum", "rarity": "epic", "xp": 150, "custom": "built_privacy"},
    {"id": "token_burner", "name": "Token Burner", "category": "sanctum", "rarity": "rare", "xp": 75, "stat": "tokens_used", "threshold": 100000},
    {"id": "million_token_club", "name": "Million Token Club", "category": "sanctum", "rarity": "epic", "xp": 200, "stat": "tokens_used", "threshold": 1000000},
    {"id": "night_builder", "name": "Night Builder", "category": "sanctum", "rarity": "rare", "xp": 50, "stat": "night_builds", "threshold": 1},
    {"id": "marathon_session", "name": "Marathon Session", "category": "sanctum", "rarity": "rare", "xp": 100, "stat": "longest_session_minutes", "threshold": 60},
    {"id": "concept_collector", "name": "Concept Collector", "category": "sanctum", "rarity": "common", "xp": 50, "stat": "concepts_learned", "threshold": 5},
    {"id": "knowledge_hoarder", "name": "Knowledge Hoarder", "category": "sanctum", "rarity": "epic", "xp": 200, "stat": "concepts_learned", "threshold": 20},
    {"id": "quiz_ace", "name": "Quiz Ace", "category": "sanctum", "rarity": "rare", "xp": 100, "stat": "max_quiz_streak", "threshold": 5},
    {"id": "perfect_score", "name": "Perfect Score", "category": "sanctum", "rarity": "epic", "xp": 250, "stat": "max_quiz_streak", "threshold": 10},
    {"id": "category_conqueror", "name": "Category Conqueror", "category": "sanctum", "rarity": "legendary", "xp": 1000, "custom": "all_sanctum_categories"},
    {"id": "test_runner", "name": "Test Runner", "category": "sanctum", "rarity": "uncommon", "xp": 50, "custom": "tests_generated"},
    {"id": "mainnet_pioneer", "name": "Mainnet Pioneer", "category": "sanctum", "rarity": "epic", "xp": 400, "custom": "mainnet_deployed"},
    {"id": "optimizer", "name": "Optimizer", "category": "sanctum", "rarity": "uncommon", "xp": 50, "custom": "contract_optimized"},
    {"id": "conversationalist", "name": "Conversationalist", "category": "sanctum", "rarity": "uncommon", "xp": 75, "stat": "sanctum_messages", "threshold": 100},
    # Learning
    {"id": "first_lesson", "name": "First Lesson", "category": "learning", "rarity": "common", "xp": 15, "stat": "modules_completed", "threshold": 1},
    {"id": "explorer_initiate", "name": "Explorer Initiate", "category": "learning", "rarity": "common", "xp": 50, "stat": "explorer_modules", "threshold": 5},
    {"id": "builder_initiate", "name": "Builder Initiate", "category": "learning", "rarity": "common", "xp": 50, "stat": "builder_modules", "threshold": 5},
    {"id": "hacker_initiate", "name": "Hacker Initiate", "category": "learning", "rarity": "common", "xp": 50, "stat": "hacker_modules", "threshold": 5},
    {"id": "founder_initiate", "name": "Founder Initiate", "category": "learning", "rarity": "common", "xp": 50, "stat": "founder_modules", "threshold": 5},
    {"id": "explorer_graduate", "name": "Explorer Graduate", "category": "learning", "rarity": "rare", "xp": 250, "stat": "explorer_modules", "threshold": 16},
    {"id": "builder_graduate", "name": "Builder Graduate", "category": "learning", "rarity": "rare", "xp": 350, "stat": "builder_modules", "threshold": 22},
    {"id": "hacker_graduate", "name": "Hacker Graduate", "category": "learning", "rarity": "rare", "xp": 250, "stat": "hacker_modules", "threshold": 16},
    {"id": "founder_graduate", "name": "Founder Graduate", "category": "learning", "rarity": "rare", "xp": 200, "stat": "founder_modules", "threshold": 12},
    {"id": "cross_chain_scholar", "name": "Cross-Chain Scholar", "category": "learning", "rarity": "rare", "xp": 75, "custom": "cross_chain_done"},
    {"id": "rustacean_rising", "name": "Rustacean Rising", "category": "learning", "rarity": "rare", "xp": 100, "custom": "rust_path_done"},
    {"id": "constellation_master", "name": "Constellation Master", "category": "learning", "rarity": "legendary", "xp": 2000, "custom": "all_66_modules"},
    {"id": "first_certificate", "name": "First Certificate", "category": "learning", "rarity": "epic", "xp": 300, "stat": "certificates_earned", "threshold": 1},
    {"id": "certified_legend", "name": "Certified Legend", "category": "learning", "rarity": "legendary", "xp": 1500, "stat": "certificates_earned", "threshold": 4},
    {"id": "quick_starter", "name": "Quick Starter", "category": "learning", "rarity": "common", "xp": 25, "custom": "quick_start_done"},
    # Economy
    {"id": "first_investment", "name": "First Investment", "category": "economy", "rarity": "rare", "xp": 100, "stat": "total_spent", "threshold": 1},
    {"id": "specter_class", "name": "Specter Class", "category": "economy", "rarity": "rare", "xp": 150, "custom": "tier_specter"},
    {"id": "legion_class", "name": "Legion Class", "category": "economy", "rarity": "epic", "xp": 300, "custom": "tier_legion"},
    {"id": "leviathan_class", "name": "Leviathan Class", "category": "economy", "rarity": "legendary", "xp": 750, "custom": "tier_leviathan"},
    {"id": "topup_king", "name": "Top-Up King", "category": "economy", "rarity": "rare", "xp": 100, "stat": "top_ups_count", "threshold": 5},
    {"id": "big_spender", "name": "Big Spender", "category": "economy", "rarity": "epic", "xp": 300, "stat": "total_spent", "threshold": 100},
    # Social
    {"id": "profile_shared", "name": "Profile Shared", "category": "social", "rarity": "common", "xp": 15, "stat": "profile_shares", "threshold": 1},
    {"id": "show_and_tell", "name": "Show & Tell", "category": "social", "rarity": "rare", "xp": 50, "stat": "contracts_shared", "threshold": 1},
    {"id": "referral_agent", "name": "Referral Agent", "category": "social", "rarity": "epic", "xp": 200, "stat": "referrals", "threshold": 1},
    {"id": "early_adopter", "name": "Early Adopter", "category": "social", "rarity": "legendary", "xp": 500, "custom": "beta_user"},
    # Streaks
    {"id": "day_one", "name": "Day One", "category": "streaks", "rarity": "common", "xp": 25, "stat": "current_streak", "threshold": 2},
    {"id": "three_day_streak", "name": "Three-Day Streak", "category": "streaks", "rarity": "common", "xp": 50, "stat": "longest_streak", "threshold": 3},
    {"id": "week_warrior", "name": "Week Warrior", "category": "streaks", "rarity": "rare", "xp": 150, "stat": "longest_streak", "threshold": 7},
    {"id": "monthly_legend", "name": "Monthly Legend", "category": "streaks", "rarity": "epic", "xp": 500, "stat": "longest_streak", "threshold": 30},
    {"id": "og_builder", "name": "OG Builder", "category": "streaks", "rarity": "rare", "xp": 100, "stat": "account_age_days", "threshold": 90},
    {"id": "void_veteran", "name": "Void Veteran", "category": "streaks", "rarity": "legendary", "xp": 500, "stat": "account_age_days", "threshold": 365},
    {"id": "weekend_warrior", "name": "Weekend Warrior", "category": "streaks", "rarity": "common", "xp": 30, "custom": "weekend_active"},
    # Secret
    {"id": "the_penguin_knows", "name": "The Penguin Knows", "category": "secret", "rarity": "legendary", "xp": 250, "custom": "asked_the_plan", "secret": True, "hint": "Every penguin has a plan..."},
    {"id": "near_zero", "name": "NEAR Zero", "category": "secret", "rarity": "rare", "xp": 50, "custom": "zero_balance_wallet", "secret": True, "hint": "Some wallets hold nothing but potential"},
    {"id": "bubble_bath", "name": "Bubble Bath", "category": "secret", "rarity": "rare", "xp": 75, "stat": "bubbles_clicked_in_session", "threshold": 50, "secret": True, "hint": "Pop pop pop pop pop..."},
    {"id": "explorer_404", "name": "404 Explorer", "category": "secret", "rarity": "common", "xp": 10, "custom": "found_404", "secret": True, "hint": "Not all who wander find a page"},
    {"id": "dark_mode_only", "name": "Dark Mode Only", "category": "secret", "rarity": "common", "xp": 5, "custom": "first_visit", "secret": True, "hint": "The void is already dark..."},
    {"id": "door_number_3", "name": "What's Behind Door #3", "category": "secret", "rarity": "rare", "xp": 30, "stat": "logo_clicks", "threshold": 3, "secret": True, "hint": "The logo knows more than it shows"},
    {"id": "the_deep_void", "name": "The Deep Void", "category": "secret", "rarity": "common", "xp": 15, "custom": "deep_scroll", "secret": True, "hint": "How deep does the rabbit hole go?"},
    {"id": "konami_coder", "name": "Konami Coder", "category": "secret", "rarity": "legendary", "xp": 100, "custom": "konami_code", "secret": True, "hint": "30 lives weren't enough for the void"},
]

SKILL_NODE_SEED_DATA: list[dict] = [
    # Explorer track
    {"id": "what-is-blockchain", "label": "What is Blockchain?", "xp": 50, "tier": "foundation", "track": "explorer", "prerequisites": []},
    {"id": "what-is-near", "label": "What is NEAR?", "xp": 50, "tier": "foundation", "track": "explorer", "prerequisites": ["what-is-blockchain"]},
    {"id": "create-a-wallet", "label": "Create a Wallet", "xp": 50, "tier": "foundation", "track": "explorer", "prerequisites": ["what-is-near"]},
    {"id": "your-first-transaction", "label": "Your First Transaction", "xp": 50, "tier": "foundation", "track": "explorer", "prerequisites": ["create-a-wallet"]},
    {"id": "understanding-dapps", "label": "Understanding dApps", "xp": 50, "tier": "foundation", "track": "explorer", "prerequisites": ["your-first-transaction"]},
    {"id": "reading-smart-contracts", "label": "Reading Smart Contracts", "xp": 50, "tier": "core", "track": "explorer", "prerequisites": ["understanding-dapps"]},
    {"id": "near-ecosystem-tour", "label": "NEAR Ecosystem Tour", "xp": 50, "tier": "core", "track": "explorer", "prerequisites": ["reading-smart-contracts"]},
    {"id": "near-vs-other-chains", "label": "NEAR vs Other Chains", "xp": 50, "tier": "core", "track": "explorer", "prerequisites": ["near-ecosystem-tour"]},
    {"id": "reading-the-explorer", "label": "Reading the Explorer", "xp": 50, "tier": "core", "track": "explorer", "prerequisites": ["near-ecosystem-tour"]},
    {"id": "defi-basics", "label": "DeFi Basics", "xp": 50, "tier": "core", "track": "explorer", "prerequisites": ["reading-the-explorer"]},
    {"id": "choose-your-path", "label": "Choose Your Path", "xp": 50, "tier": "advanced", "track": "explorer", "prerequisites": ["near-vs-other-chains"]},
    {"id": "nft-basics-on-near", "label": "NFT Basics on NEAR", "xp": 50, "tier": "advanced", "track": "explorer", "prerequisites": ["defi-basics"]},
    {"id": "staking-and-validators", "label": "Staking & Validators", "xp": 50, "tier": "advanced", "track": "explorer", "prerequisites": ["defi-basics"]},
    {"id": "daos-on-near", "label": "DAOs on NEAR", "xp": 50, "tier": "advanced", "track": "explorer", "prerequisites": ["staking-and-validators"]},
    {"id": "staying-safe-in-web3", "label": "Staying Safe in Web3", "xp": 50, "tier": "mastery", "track": "explorer", "prerequisites": ["choose-your-path", "daos-on-near"]},
    {"id": "near-data-tools", "label": "NEAR Data Tools", "xp": 50, "tier": "mastery", "track": "explorer", "prerequisites": ["staying-safe-in-web3", "nft-basics-on-near"]},
    # Builder track
    {"id": "dev-environment-setup", "label": "Dev Environment Setup", "xp": 100, "tier": "foundation", "track": "builder", "prerequisites": []},
    {"id": "rust-fundamentals", "label": "Rust Fundamentals", "xp": 100, "tier": "foundation", "track": "builder", "prerequisites": ["dev-environment-setup"]},
    {"id": "your-first-contract", "label": "Your First Contract", "xp": 100, "tier": "core", "track": "builder", "prerequisites": ["rust-fundamentals"]},
    {"id": "account-model-access-keys", "label": "Account Model & Access Keys", "xp": 100, "tier": "core", "track": "builder", "prerequisites": ["your-first-contract"]},
    {"id": "state-management", "label": "State Management", "xp": 100, "tier": "core", "track": "builder", "prerequisites": ["account-model-access-keys"]},
    {"id": "near-cli-mastery", "label": "NEAR CLI Mastery", "xp": 100, "tier": "core", "track": "builder", "prerequisites": ["your-first-contract"]},
    {"id": "testing-debugging", "label": "Testing & Debugging", "xp": 100, "tier": "core", "track": "builder", "prerequisites": ["state-management", "near-cli-mastery"]},
    {"id": "frontend-integration", "label": "Frontend Integration", "xp": 100, "tier": "core", "track": "builder", "prerequisites": ["testing-debugging"]},
    {"id": "token-standards", "label": "Token Standards", "xp": 100, "tier": "core", "track": "builder", "prerequisites": ["testing-debugging"]},
    {"id": "nep-standards-deep-dive", "label": "NEP Standards Deep Dive", "xp": 100, "tier": "advanced", "track": "builder", "prerequisites": ["token-standards"]},
    {"id": "building-a-dapp", "label": "Building a dApp", "xp": 100, "tier": "advanced", "track": "builder", "prerequisites": ["frontend-integration", "nep-standards-deep-dive"]},
    {"id": "security-best-practices", "label": "Security Best Practices", "xp": 100, "tier": "advanced", "track": "builder", "prerequisites": ["building-a-dapp"]},
    {"id": "upgrading-contracts", "label": "Upgrading Contracts", "xp": 100, "tier": "advanced", "track": "builder", "prerequisites": ["security-best-practices"]},
    {"id": "deployment", "label": "Deployment", "xp": 100, "tier": "advanced", "track": "builder", "prerequisites": ["upgrading-contracts"]},
    {"id": "optimization", "label": "Optimization", "xp": 100, "tier": "advanced", "track": "builder", "prerequisites": ["deployment"]},
    {"id": "launch-checklist", "label": "Launch Checklist", "xp": 100, "tier": "advanced", "track": "builder", "prerequisites": ["optimization"]},
    {"id": "building-an-nft-contract", "label": "Building an NFT Contract", "xp": 100, "tier": "advanced", "track": "builder", "prerequisites": ["token-standards"]},
    {"id": "building-a-dao-contract", "label": "Building a DAO Contract", "xp": 100, "tier": "advanced", "track": "builder", "prerequisites": ["nep-standards-deep-dive"]},
    {"id": "defi-contract-patterns", "label": "DeFi Contract Patterns", "xp": 100, "tier": "advanced", "track": "builder", "prerequisites": ["building-a-dapp"]},
    {"id": "aurora-evm-compatibility", "label": "Aurora EVM Compatibility", "xp": 100, "tier": "mastery", "track": "builder", "prerequisites": ["launch-checklist", "building-an-nft-contract"]},
    {"id": "wallet-selector-integration", "label": "Wallet Connector Integration", "xp": 100, "tier": "mastery", "track": "builder", "prerequisites": ["launch-checklist", "building-a-dao-contract"]},
    {"id": "near-social-bos", "label": "NEAR Social & BOS", "xp": 100, "tier": "mastery", "track": "builder", "prerequisites": ["launch-checklist", "defi-contract-patterns"]},
    # Hacker track
    {"id": "near-architecture-deep-dive", "label": "NEAR Architecture Deep Dive", "xp": 150, "tier": "foundation", "track": "hacker", "prerequisites": []},
    {"id": "cross-contract-calls", "label": "Cross-Contract Calls", "xp": 150, "tier": "foundation", "track": "hacker", "prerequisites": ["near-architecture-deep-dive"]},
    {"id": "advanced-storage", "label": "Advanced Storage", "xp": 150, "tier": "foundation", "track": "hacker", "prerequisites": ["cross-contract-calls"]},
    {"id": "chain-signatures", "label": "Chain Signatures", "xp": 150, "tier": "foundation", "track": "hacker", "prerequisites": ["advanced-storage"]},
    {"id": "intents-chain-abstraction", "label": "Intents & Chain Abstraction", "xp": 150, "tier": "core", "track": "hacker", "prerequisites": ["chain-signatures"]},
    {"id": "shade-agents", "label": "Shade Agents", "xp": 150, "tier": "core", "track": "hacker", "prerequisites": ["intents-chain-abstraction"]},
    {"id": "ai-agent-integration", "label": "AI Agent Integration", "xp": 150, "tier": "core", "track": "hacker", "prerequisites": ["shade-agents"]},
    {"id": "mev-transaction-ordering", "label": "MEV & Transaction Ordering", "xp": 150, "tier": "core", "track": "hacker", "prerequisites": ["ai-agent-integration"]},
    {"id": "building-an-indexer", "label": "Building an Indexer", "xp": 150, "tier": "advanced", "track": "hacker", "prerequisites": ["mev-transaction-ordering"]},
    {"id": "multi-chain-with-near", "label": "Multi-Chain with NEAR", "xp": 150, "tier": "advanced", "track": "hacker", "prerequisites": ["chain-signatures"]},
    {"id": "production-patterns", "label": "Production Patterns", "xp": 150, "tier": "advanced", "track": "hacker", "prerequisites": ["building-an-indexer", "multi-chain-with-near"]},
    {"id": "zero-knowledge-on-near", "label": "Zero Knowledge on NEAR", "xp": 150, "tier": "advanced", "track": "hacker", "prerequisites": ["production-patterns"]},
    {"id": "oracle-integration", "label": "Oracle Integration", "xp": 150, "tier": "advanced", "track": "hacker", "prerequisites": ["production-patterns"]},
    {"id": "gas-optimization-deep-dive", "label": "Gas Optimization Deep Dive", "xp": 150, "tier": "mastery", "track": "hacker", "prerequisites": ["zero-knowledge-on-near", "oracle-integration"]},
    {"id": "bridge-architecture", "label": "Bridge Architecture", "xp": 150, "tier": "mastery", "track": "hacker", "prerequisites": ["gas-optimization-deep-dive"]},
    {"id": "formal-verification", "label": "Formal Verification", "xp": 150, "tier": "mastery", "track": "hacker", "prerequisites": ["bridge-architecture"]},
    # Founder track
    {"id": "near-grants-funding", "label": "NEAR Grants & Funding", "xp": 75, "tier": "foundation", "track": "founder", "prerequisites": []},
    {"id": "tokenomics-design", "label": "Tokenomics Design", "xp": 75, "tier": "foundation", "track": "founder", "prerequisites": ["near-grants-funding"]},
    {"id": "building-in-public", "label": "Building in Public", "xp": 75, "tier": "foundation", "track": "founder", "prerequisites": ["tokenomics-design"]},
    {"id": "pitching-your-project", "label": "Pitching Your Project", "xp": 75, "tier": "core", "track": "founder", "prerequisites": ["building-in-public"]},
    {"id": "revenue-models-for-dapps", "label": "Revenue Models for dApps", "xp": 75, "tier": "core", "track": "founder", "prerequisites": ["pitching-your-project"]},
    {"id": "community-building", "label": "Community Building", "xp": 75, "tier": "core", "track": "founder", "prerequisites": ["revenue-models-for-dapps"]},
    {"id": "go-to-market", "label": "Go-to-Market", "xp": 75, "tier": "advanced", "track": "founder", "prerequisites": ["community-building"]},
    {"id": "legal-regulatory-basics", "label": "Legal & Regulatory Basics", "xp": 75, "tier": "advanced", "track": "founder", "prerequisites": ["go-to-market"]},
    {"id": "treasury-management", "label": "Treasury Management", "xp": 75, "tier": "advanced", "track": "founder", "prerequisites": ["go-to-market"]},
    {"id": "metrics-that-matter", "label": "Metrics That Matter", "xp": 75, "tier": "mastery", "track": "founder", "prerequisites": ["legal-regulatory-basics", "treasury-management"]},
    {"id": "marketing-for-web3", "label": "Marketing for Web3", "xp": 75, "tier": "mastery", "track": "founder", "prerequisites": ["metrics-that-matter"]},
    {"id": "investor-relations", "label": "Investor Relations", "xp": 75, "tier": "mastery", "track": "founder", "prerequisites": ["marketing-for-web3"]},
]


def _achievement_from_seed(data: dict) -> AchievementDef:
    fields = {k: v for k, v in data.items() if k not in ("stat", "threshold", "custom")}
    if "custom" in data:
        fields["trigger"] = CustomTrigger(name=data["custom"])
    elif "stat" in data:
        fields["trigger"] = ThresholdTrigger(stat=data["stat"], threshold=data["threshold"])
    return AchievementDef(**fields)


def build_achievements(seed: list[dict] | None = None) -> list[AchievementDef]:
    return [_achievement_from_seed(d) for d in (seed if seed is not None else ACHIEVEMENT_SEED_DATA)]


def build_skill_nodes(seed: list[dict] | None = None) -> list[SkillNode]:
    return [SkillNode(**d) for d in (seed if seed is not None else SKILL_NODE_SEED_DATA)]


@lru_cache
def load_default_registry() -> Registry:
    """Build (once per process) the registry for the production catalog."""
    registry = Registry(build_achievements(), build_skill_nodes())
    logger.info(
        "Seeded catalog: %d achievements, %d skill nodes",
        len(registry.achievements),
        len(registry.skill_nodes),
    )
    return registry
