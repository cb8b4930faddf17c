"""Built-in integration definitions.

Entries are grouped by category and listed in display order; the
position of an entry in ``BUILTIN_INTEGRATIONS`` is its position in
grouped listings.  Status functions below read the configuration
snapshot only.
"""
from __future__ import annotations

from integration_catalog.config import Config
from integration_catalog.registry.models import (
    IntegrationCategory,
    IntegrationEntry,
    IntegrationStatus,
    StatusFn,
)

# ---------------------------------------------------------------------------
# Status functions
# ---------------------------------------------------------------------------


def _coming_soon(config: Config) -> IntegrationStatus:
    return IntegrationStatus.COMING_SOON


def _available(config: Config) -> IntegrationStatus:
    return IntegrationStatus.AVAILABLE


def _built_in(config: Config) -> IntegrationStatus:
    return IntegrationStatus.ACTIVE


def _active_if(condition: bool) -> IntegrationStatus:
    return IntegrationStatus.ACTIVE if condition else IntegrationStatus.AVAILABLE


def _telegram(config: Config) -> IntegrationStatus:
    section = config.channels.telegram
    return _active_if(section is not None and bool(section.bot_token))


def _discord(config: Config) -> IntegrationStatus:
    section = config.channels.discord
    return _active_if(section is not None and bool(section.bot_token))


def _slack(config: Config) -> IntegrationStatus:
    section = config.channels.slack
    return _active_if(section is not None and bool(section.bot_token))


def _webhooks(config: Config) -> IntegrationStatus:
    return _active_if(config.channels.webhook is not None)


def _imessage(config: Config) -> IntegrationStatus:
    return _active_if(config.channels.imessage is not None)


def _matrix(config: Config) -> IntegrationStatus:
    section = config.channels.matrix
    return _active_if(section is not None and bool(section.access_token))


def _openrouter(config: Config) -> IntegrationStatus:
    return _active_if(config.default_provider == "openrouter" and config.api_key is not None)


def _provider(key: str) -> StatusFn:
    """Return a status function that is active when *key* is the default provider."""

    def status(config: Config) -> IntegrationStatus:
        return _active_if(config.default_provider == key)

    status.__name__ = f"_provider_{key.replace('-', '_')}"
    return status


def _browser(config: Config) -> IntegrationStatus:
    return _active_if(config.browser.enabled)


def _macos(config: Config) -> IntegrationStatus:
    return _active_if((config.platform or "") == "darwin")


def _linux(config: Config) -> IntegrationStatus:
    return _active_if((config.platform or "").startswith("linux"))


def _entry(
    name: str, description: str, category: IntegrationCategory, status_fn: StatusFn
) -> IntegrationEntry:
    return IntegrationEntry(
        name=name, description=description, category=category, status_fn=status_fn
    )


_CHAT = IntegrationCategory.CHAT
_AI = IntegrationCategory.AI_MODEL
_PRODUCTIVITY = IntegrationCategory.PRODUCTIVITY
_MUSIC = IntegrationCategory.MUSIC_AUDIO
_HOME = IntegrationCategory.SMART_HOME
_TOOLS = IntegrationCategory.TOOLS_AUTOMATION
_MEDIA = IntegrationCategory.MEDIA_CREATIVE
_SOCIAL = IntegrationCategory.SOCIAL
_PLATFORM = IntegrationCategory.PLATFORM

# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

BUILTIN_INTEGRATIONS: tuple[IntegrationEntry, ...] = (
    # Chat providers
    _entry("Telegram", "Bot API — long-polling", _CHAT, _telegram),
    _entry("Discord", "Servers, channels & DMs", _CHAT, _discord),
    _entry("Slack", "Workspace apps via Web API", _CHAT, _slack),
    _entry("Webhooks", "HTTP endpoint for triggers", _CHAT, _webhooks),
    _entry("WhatsApp", "QR pairing via web bridge", _CHAT, _coming_soon),
    _entry("Signal", "Privacy-focused via signal-cli", _CHAT, _coming_soon),
    _entry("iMessage", "macOS AppleScript bridge", _CHAT, _imessage),
    _entry("Microsoft Teams", "Enterprise chat support", _CHAT, _coming_soon),
    _entry("Matrix", "Matrix protocol (Element)", _CHAT, _matrix),
    _entry("Nostr", "Decentralized DMs (NIP-04)", _CHAT, _coming_soon),
    _entry("WebChat", "Browser-based chat UI", _CHAT, _coming_soon),
    _entry("Nextcloud Talk", "Self-hosted Nextcloud chat", _CHAT, _coming_soon),
    _entry("Zalo", "Zalo Bot API", _CHAT, _coming_soon),
    # AI models
    _entry("OpenRouter", "200+ models, 1 API key", _AI, _openrouter),
    _entry("Anthropic", "Claude 3.5/4 Sonnet & Opus", _AI, _provider("anthropic")),
    _entry("OpenAI", "GPT-4o, GPT-5, o1", _AI, _provider("openai")),
    _entry("Google", "Gemini 2.5 Pro/Flash", _AI, _provider("google")),
    _entry("DeepSeek", "DeepSeek V3 & R1", _AI, _provider("deepseek")),
    _entry("xAI", "Grok 3 & 4", _AI, _provider("xai")),
    _entry("Mistral", "Mistral Large & Codestral", _AI, _provider("mistral")),
    _entry("Ollama", "Local models (Llama, etc.)", _AI, _provider("ollama")),
    _entry("Perplexity", "Search-augmented AI", _AI, _provider("perplexity")),
    _entry("Hugging Face", "Open-source models", _AI, _coming_soon),
    _entry("LM Studio", "Local model server", _AI, _coming_soon),
    _entry("Venice", "Privacy-first inference (Llama, Opus)", _AI, _provider("venice")),
    _entry("Vercel AI", "Vercel AI Gateway", _AI, _provider("vercel")),
    _entry("Cloudflare AI", "Cloudflare AI Gateway", _AI, _provider("cloudflare")),
    _entry("Moonshot", "Kimi & Kimi Coding", _AI, _provider("moonshot")),
    _entry("Synthetic", "Synthetic AI models", _AI, _provider("synthetic")),
    _entry("OpenCode Zen", "Code-focused AI models", _AI, _provider("opencode")),
    _entry("Z.AI", "Z.AI inference", _AI, _provider("zai")),
    _entry("GLM", "ChatGLM / Zhipu models", _AI, _provider("glm")),
    _entry("MiniMax", "MiniMax AI models", _AI, _provider("minimax")),
    _entry("Amazon Bedrock", "AWS managed model access", _AI, _provider("bedrock")),
    _entry("Qianfan", "Baidu AI models", _AI, _provider("qianfan")),
    _entry("Groq", "Ultra-fast LPU inference", _AI, _provider("groq")),
    _entry("Together AI", "Open-source model hosting", _AI, _provider("together")),
    _entry("Fireworks AI", "Fast open-source inference", _AI, _provider("fireworks")),
    _entry("Cohere", "Command R+ & embeddings", _AI, _provider("cohere")),
    # Productivity
    _entry("GitHub", "Code, issues, PRs", _PRODUCTIVITY, _coming_soon),
    _entry("Notion", "Workspace & databases", _PRODUCTIVITY, _coming_soon),
    _entry("Apple Notes", "Native macOS/iOS notes", _PRODUCTIVITY, _coming_soon),
    _entry("Apple Reminders", "Task management", _PRODUCTIVITY, _coming_soon),
    _entry("Obsidian", "Knowledge graph notes", _PRODUCTIVITY, _coming_soon),
    _entry("Things 3", "GTD task manager", _PRODUCTIVITY, _coming_soon),
    _entry("Bear Notes", "Markdown notes", _PRODUCTIVITY, _coming_soon),
    _entry("Trello", "Kanban boards", _PRODUCTIVITY, _coming_soon),
    _entry("Linear", "Issue tracking", _PRODUCTIVITY, _coming_soon),
    # Music & audio
    _entry("Spotify", "Music playback control", _MUSIC, _coming_soon),
    _entry("Sonos", "Multi-room audio", _MUSIC, _coming_soon),
    _entry("Shazam", "Song recognition", _MUSIC, _coming_soon),
    # Smart home
    _entry("Home Assistant", "Home automation hub", _HOME, _coming_soon),
    _entry("Philips Hue", "Smart lighting", _HOME, _coming_soon),
    _entry("8Sleep", "Smart mattress", _HOME, _coming_soon),
    # Tools & automation
    _entry("Browser", "Chrome/Chromium control", _TOOLS, _browser),
    _entry("Shell", "Terminal command execution", _TOOLS, _built_in),
    _entry("File System", "Read/write files", _TOOLS, _built_in),
    _entry("Cron", "Scheduled tasks", _TOOLS, _available),
    _entry("Voice", "Voice wake + talk mode", _TOOLS, _coming_soon),
    _entry("Gmail", "Email triggers & send", _TOOLS, _coming_soon),
    _entry("1Password", "Secure credentials", _TOOLS, _coming_soon),
    _entry("Weather", "Forecasts & conditions", _TOOLS, _coming_soon),
    _entry("Canvas", "Visual workspace + A2UI", _TOOLS, _coming_soon),
    # Media & creative
    _entry("Image Gen", "AI image generation", _MEDIA, _coming_soon),
    _entry("GIF Search", "Find the perfect GIF", _MEDIA, _coming_soon),
    _entry("Screen Capture", "Screenshot & screen control", _MEDIA, _coming_soon),
    _entry("Camera", "Photo/video capture", _MEDIA, _coming_soon),
    # Social
    _entry("Twitter/X", "Tweet, reply, search", _SOCIAL, _coming_soon),
    _entry("Email", "Send & read emails", _SOCIAL, _coming_soon),
    # Platforms
    _entry("macOS", "Native support + AppleScript", _PLATFORM, _macos),
    _entry("Linux", "Native support", _PLATFORM, _linux),
    _entry("Windows", "WSL2 recommended", _PLATFORM, _available),
    _entry("iOS", "Chat via Telegram/Discord", _PLATFORM, _available),
    _entry("Android", "Chat via Telegram/Discord", _PLATFORM, _available),
)
