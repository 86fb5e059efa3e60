"""
Heuristic hardware attribute extraction from catalog free text.

Every rule here is best-effort: a missing signal yields ``None`` / ``False``
rather than an error, and the scorer treats it as "unknown".
"""
from __future__ import annotations

import re
from typing import Protocol

from .models import AttributeBundle, DeviceFeatures

_WS_RE = re.compile(r"\s+")

# A size followed by its keyword ("8GB メモリ", "256GB SSD") may only be
# separated by punctuation or spaces, never by words.
_JA_LETTERS = r"a-zA-Zぁ-んァ-ン一-龥"


class AttributeExtractor(Protocol):
    """One implementation per catalog-text convention."""

    def extract_attributes(self, text: str) -> AttributeBundle: ...

    def extract_features(self, text: str) -> DeviceFeatures: ...


def normalize_text(text: str | None) -> str:
    return _WS_RE.sub(" ", str(text or "")).strip()


class JapaneseCatalogExtractor:
    """Pattern set for Japanese refurbished-PC listings (MakeShop exports)."""

    MEMORY_PATTERNS = (
        re.compile(r"(?:メモリ|RAM|Memory)[^0-9]{0,10}(\d{1,3})\s*GB", re.IGNORECASE),
        re.compile(
            rf"(\d{{1,3}})\s*GB[^{_JA_LETTERS}]{{0,10}}(?:メモリ|RAM|Memory)",
            re.IGNORECASE,
        ),
    )
    STORAGE_PATTERNS = (
        re.compile(r"SSD[^0-9]{0,10}(\d{1,4})\s*(GB|TB)", re.IGNORECASE),
        re.compile(
            rf"(\d{{1,4}})\s*(GB|TB)[^{_JA_LETTERS}]{{0,10}}SSD",
            re.IGNORECASE,
        ),
    )
    SSD_RE = re.compile(r"SSD", re.IGNORECASE)
    HDD_RE = re.compile(r"HDD", re.IGNORECASE)
    GPU_RE = re.compile(r"GeForce|RTX|GTX|Radeon|(?<![A-Za-z])Arc(?-i:(?![a-z]))", re.IGNORECASE)
    INTEL_CPU_RE = re.compile(r"i[3579]-(\d{4,5})[A-Z]{0,2}", re.IGNORECASE)
    AMD_CPU_RE = re.compile(r"Ryzen\s*[3579]\s*\d{4,5}[A-Z]{0,2}", re.IGNORECASE)

    LAPTOP_RE = re.compile(
        r"ノートPC|ノートパソコン|ノート型|laptop|notebook|Let'?s\s*note|レッツノート"
        r"|ThinkPad|Latitude|dynabook|LIFEBOOK|VersaPro|LAVIE|ProBook|EliteBook"
        r"|VAIO|Surface\s*(?:Pro|Laptop)",
        re.IGNORECASE,
    )
    DESKTOP_RE = re.compile(
        r"デスクトップ|desktop|タワー型|省スペース型|ミニPC|mini\s*PC|一体型"
        r"|OptiPlex|ThinkCentre|ESPRIMO|Mate(?![a-zA-Z])|ProDesk|EliteDesk|Vostro",
        re.IGNORECASE,
    )

    CAMERA_RE = re.compile(r"カメラ|webcam|camera", re.IGNORECASE)
    NO_CAMERA_RE = re.compile(r"カメラ\s*(?:なし|無し|非搭載)|no\s*(?:web)?cam", re.IGNORECASE)
    KEYPAD_RE = re.compile(r"テンキー|10キー|numeric\s*keypad|numpad", re.IGNORECASE)
    NO_KEYPAD_RE = re.compile(r"テンキー\s*(?:なし|無し|非搭載)", re.IGNORECASE)
    SCREEN_RE = re.compile(r"(?<![\d.])(\d{1,2}(?:\.\d{1,2})?)\s*(?:インチ|型|inch|″|\")", re.IGNORECASE)

    def _first(self, patterns, text: str) -> re.Match | None:
        for pattern in patterns:
            match = pattern.search(text)
            if match:
                return match
        return None

    def _memory_gb(self, text: str) -> int | None:
        match = self._first(self.MEMORY_PATTERNS, text)
        return int(match.group(1)) if match else None

    def _storage_gb(self, text: str) -> int | None:
        match = self._first(self.STORAGE_PATTERNS, text)
        if not match:
            return None
        size = int(match.group(1))
        return size * 1024 if match.group(2).upper() == "TB" else size

    def _cpu(self, text: str) -> tuple[str | None, int | None]:
        intel = self.INTEL_CPU_RE.search(text)
        if intel:
            digits = intel.group(1)
            generation = int(digits[0]) if len(digits) == 4 else int(digits[:2])
            return intel.group(0), generation
        amd = self.AMD_CPU_RE.search(text)
        if amd:
            return amd.group(0), None
        return None, None

    def _device(self, text: str) -> str:
        laptop = bool(self.LAPTOP_RE.search(text))
        desktop = bool(self.DESKTOP_RE.search(text))
        if laptop and not desktop:
            return "laptop"
        if desktop and not laptop:
            return "desktop"
        return "any"

    def _screen_inches(self, text: str) -> float | None:
        match = self.SCREEN_RE.search(text)
        return float(match.group(1)) if match else None

    def extract_features(self, text: str) -> DeviceFeatures:
        t = normalize_text(text)
        return DeviceFeatures(
            device=self._device(t),
            has_camera=bool(self.CAMERA_RE.search(t)) and not self.NO_CAMERA_RE.search(t),
            has_keypad=bool(self.KEYPAD_RE.search(t)) and not self.NO_KEYPAD_RE.search(t),
            screen_inches=self._screen_inches(t),
        )

    def extract_attributes(self, text: str) -> AttributeBundle:
        t = normalize_text(text)
        cpu, generation = self._cpu(t)
        return AttributeBundle(
            memory_gb=self._memory_gb(t),
            storage_gb=self._storage_gb(t),
            has_gpu=bool(self.GPU_RE.search(t)),
            hdd_only=bool(self.HDD_RE.search(t)) and not self.SSD_RE.search(t),
            cpu=cpu,
            cpu_generation=generation,
            features=self.extract_features(t),
        )


DEFAULT_EXTRACTOR: AttributeExtractor = JapaneseCatalogExtractor()


def extract_attributes(
    text: str, extractor: AttributeExtractor = DEFAULT_EXTRACTOR,
) -> AttributeBundle:
    """Parse a product's name/description into an ``AttributeBundle``."""
    return extractor.extract_attributes(text)
