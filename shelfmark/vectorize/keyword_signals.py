"""Lightweight keyword signals derived from bookmark title, description and URL."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

SignalSource = Literal["contextual", "pattern", "topic"]

URL_CONTEXT_CONFIDENCE = 0.7
PHRASE_BASE_CONFIDENCE = 0.6
PHRASE_REPEAT_BONUS = 0.1
PHRASE_MAX_CONFIDENCE = 0.85
TOPIC_MIN_COVERAGE = 0.2
TOPIC_MAX_CONFIDENCE = 0.8
MIN_WORD_LENGTH = 3

_STOP_WORDS = frozenset(
    {
        "the", "and", "for", "are", "but", "not", "you", "all", "can", "had",
        "her", "was", "one", "our", "out", "day", "get", "has", "him", "his",
        "how", "man", "new", "now", "old", "see", "two", "way", "who", "boy",
        "did", "its", "let", "put", "say", "she", "too", "use", "this", "that",
    },
)  # fmt: skip

_URL_CONTEXT_PATTERNS: dict[str, tuple[str, ...]] = {
    "github.com": ("programming", "open-source", "code", "repository"),
    "stackoverflow.com": ("programming", "q-and-a", "tutorial", "debugging"),
    "medium.com": ("blog", "article", "tutorial", "opinion"),
    "dev.to": ("programming", "blog", "tutorial", "community"),
    "youtube.com": ("video", "tutorial", "entertainment", "educational"),
    "docs.": ("documentation", "reference", "guide"),
    "api.": ("api", "reference", "documentation"),
    "blog": ("blog", "article", "personal"),
    "news": ("news", "current-events", "journalism"),
}

_PHRASE_PATTERNS: dict[str, tuple[str, ...]] = {
    "how to": ("tutorial", "guide", "howto"),
    "getting started": ("beginner", "tutorial", "guide"),
    "best practices": ("best-practices", "guide", "reference"),
    "cheat sheet": ("cheatsheet", "reference", "quick-reference"),
    "vs": ("comparison", "versus", "alternatives"),
    "review": ("review", "analysis", "opinion"),
    "introduction": ("beginner", "introduction", "basics"),
    "advanced": ("advanced", "expert", "deep-dive"),
    "free": ("free", "open-source", "gratis"),
    "open source": ("open-source", "github", "community"),
    "case study": ("case-study", "example", "real-world"),
    "benchmark": ("performance", "benchmark", "comparison"),
    "interview": ("interview", "questions", "preparation"),
    "roadmap": ("roadmap", "learning-path", "guide"),
}

_TOPIC_WORDS: dict[str, tuple[str, ...]] = {
    "programming": (
        "code", "coding", "development", "software", "programming", "developer",
        "tech", "computer", "algorithm", "function", "variable", "class", "method",
    ),
    "web-development": (
        "html", "css", "javascript", "react", "vue", "angular", "frontend",
        "backend", "fullstack", "web", "website", "browser", "dom", "ajax",
    ),
    "design": (
        "design", "visual", "graphics", "layout", "typography", "color",
        "interface", "user", "experience", "wireframe", "mockup",
    ),
    "tutorial": (
        "tutorial", "guide", "howto", "learn", "learning", "education", "course",
        "lesson", "step", "instruction", "example", "demo",
    ),
    "reference": (
        "documentation", "docs", "reference", "api", "manual", "guide",
        "specification", "cheatsheet", "lookup",
    ),
    "news": (
        "news", "article", "blog", "post", "update", "announcement", "release",
        "breaking", "latest", "current",
    ),
    "tool": (
        "tool", "utility", "app", "application", "software", "program", "service",
        "platform", "system",
    ),
    "framework": (
        "framework", "library", "package", "module", "component", "plugin",
        "extension", "addon",
    ),
    "database": (
        "database", "sql", "nosql", "mysql", "postgresql", "mongodb", "data",
        "storage", "query",
    ),
    "security": (
        "security", "encryption", "authentication", "authorization",
        "vulnerability", "exploit", "patch", "privacy", "protection",
    ),
    "performance": (
        "performance", "optimization", "speed", "fast", "slow", "benchmark",
        "profiling", "cache", "memory", "cpu",
    ),
    "testing": (
        "test", "testing", "unit", "integration", "automation", "quality", "bug",
        "debug", "mock",
    ),
    "business": (
        "business", "startup", "entrepreneur", "company", "corporate",
        "enterprise", "strategy", "market", "customer",
    ),
    "finance": (
        "finance", "money", "investment", "trading", "stock", "crypto", "bitcoin",
        "blockchain", "economics", "budget",
    ),
    "productivity": (
        "productivity", "workflow", "automation", "efficiency", "organization",
        "planning", "time", "management", "gtd",
    ),
    "health": (
        "health", "fitness", "medicine", "wellness", "nutrition", "exercise",
        "mental", "physical", "medical", "doctor",
    ),
    "science": (
        "science", "research", "study", "analysis", "data", "experiment",
        "hypothesis", "theory", "academic", "paper",
    ),
    "ai": (
        "artificial", "intelligence", "machine", "learning", "neural", "network",
        "deep", "algorithm", "model", "prediction",
    ),
    "mobile": (
        "mobile", "app", "ios", "android", "phone", "smartphone", "tablet",
        "responsive", "native", "hybrid",
    ),
}  # fmt: skip

_PHRASE_REGEXES = {
    phrase: re.compile(rf"\b{re.escape(phrase)}\b") for phrase in _PHRASE_PATTERNS
}


@dataclass(frozen=True, slots=True)
class KeywordSignal:
    """One derived keyword with its confidence and the rule that produced it."""

    keyword: str
    confidence: float
    source: SignalSource


def extract_keyword_signals(
    title: str,
    description: str | None,
    url: str,
) -> list[KeywordSignal]:
    """Return deduplicated keyword signals, most confident first."""
    full_text = f"{title} {description or ''}".lower()
    words = extract_words(full_text)

    signals: list[KeywordSignal] = []
    signals.extend(_url_context_signals(url))
    signals.extend(_phrase_signals(full_text))
    signals.extend(_topic_signals(words))
    return _deduplicate_and_sort(signals)


def extract_words(text: str) -> list[str]:
    """Return lowercase content words without punctuation or stop words."""
    words: list[str] = []
    for raw_word in text.lower().split():
        cleaned = _trim_non_alphanumeric(raw_word)
        if len(cleaned) >= MIN_WORD_LENGTH and cleaned not in _STOP_WORDS:
            words.append(cleaned)
    return words


def _url_context_signals(url: str) -> list[KeywordSignal]:
    lowered_url = url.lower()
    return [
        KeywordSignal(
            keyword=keyword,
            confidence=URL_CONTEXT_CONFIDENCE,
            source="contextual",
        )
        for pattern, keywords in _URL_CONTEXT_PATTERNS.items()
        if pattern in lowered_url
        for keyword in keywords
    ]


def _phrase_signals(full_text: str) -> list[KeywordSignal]:
    signals: list[KeywordSignal] = []
    for phrase, keywords in _PHRASE_PATTERNS.items():
        occurrences = len(_PHRASE_REGEXES[phrase].findall(full_text))
        if occurrences == 0:
            continue
        confidence = min(
            PHRASE_MAX_CONFIDENCE,
            PHRASE_BASE_CONFIDENCE + occurrences * PHRASE_REPEAT_BONUS,
        )
        signals.extend(
            KeywordSignal(keyword=keyword, confidence=confidence, source="pattern")
            for keyword in keywords
        )
    return signals


def _topic_signals(words: list[str]) -> list[KeywordSignal]:
    if not words:
        return []
    signals: list[KeywordSignal] = []
    for topic, topic_words in _TOPIC_WORDS.items():
        matches = sum(
            1
            for word in words
            if any(
                topic_word in word or word in topic_word for topic_word in topic_words
            )
        )
        coverage = matches / len(words)
        if coverage > TOPIC_MIN_COVERAGE:
            signals.append(
                KeywordSignal(
                    keyword=topic,
                    confidence=min(TOPIC_MAX_CONFIDENCE, coverage),
                    source="topic",
                ),
            )
    return signals


def _deduplicate_and_sort(signals: list[KeywordSignal]) -> list[KeywordSignal]:
    best_by_keyword: dict[str, KeywordSignal] = {}
    for signal in signals:
        existing = best_by_keyword.get(signal.keyword)
        if existing is None or signal.confidence > existing.confidence:
            best_by_keyword[signal.keyword] = signal
    return sorted(
        best_by_keyword.values(),
        key=lambda signal: (-signal.confidence, signal.keyword),
    )


def _trim_non_alphanumeric(value: str) -> str:
    start = 0
    end = len(value)
    while start < end and not value[start].isalnum():
        start += 1
    while end > start and not value[end - 1].isalnum():
        end -= 1
    return value[start:end]
