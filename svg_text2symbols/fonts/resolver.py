#!/usr/bin/env python3
"""
Font family resolution.

A FontFamily is a style-tag to face lookup with an explicit fallback chain
(requested style, then regular). Families are built from explicit font
files or discovered through fontconfig's fc-list.
"""

from __future__ import annotations

import logging
import subprocess
from io import BytesIO
from pathlib import Path
from typing import Iterable, Mapping

from fontTools.ttLib import TTCollection

from svg_text2symbols.exceptions import FaceUnavailableError, FontNotFoundError
from svg_text2symbols.fonts.face import NORMAL_WIDTH, FontFace
from svg_text2symbols.fonts.styles import FontStyle, classify_face

logger = logging.getLogger(__name__)

COLLECTION_SUFFIXES = (".ttc", ".otc")
FC_LIST_TIMEOUT = 8


class FontFamily:
    """Faces of one family keyed by style tag."""

    def __init__(self, name: str, faces: Mapping[FontStyle, FontFace]) -> None:
        self.name = name
        self._faces: dict[FontStyle, FontFace] = dict(faces)

    def __repr__(self) -> str:
        styles = ", ".join(s.value for s in self._faces)
        return f"FontFamily({self.name!r}, [{styles}])"

    @property
    def styles(self) -> list[FontStyle]:
        return list(self._faces)

    def faces(self) -> dict[FontStyle, FontFace]:
        return dict(self._faces)

    def resolve_style(self, style: FontStyle) -> FontFace | None:
        """Exact lookup; no fallback."""
        return self._faces.get(style)

    @staticmethod
    def fallback_chain(style: FontStyle) -> tuple[FontStyle, ...]:
        if style == FontStyle.REGULAR:
            return (FontStyle.REGULAR,)
        return (style, FontStyle.REGULAR)

    def resolve_face(self, style: FontStyle) -> tuple[FontStyle, FontFace]:
        """Walk the fallback chain and return the first face found.

        Raises:
            FaceUnavailableError: If neither the style nor regular exists.
        """
        for candidate in self.fallback_chain(style):
            face = self._faces.get(candidate)
            if face is not None:
                if candidate != style:
                    logger.debug("No %s face in %s, using %s", style, self.name, candidate)
                return candidate, face
        raise FaceUnavailableError(self.name, style.value)

    @classmethod
    def from_faces(cls, faces: Iterable[FontFace], name: str | None = None) -> FontFamily:
        """Classify faces by style.

        When several faces share a style, a face whose family name matches
        name exactly beats one that does not, then a normal-width face beats
        a condensed or expanded one. Remaining ties keep the first face seen.
        """
        by_style: dict[FontStyle, FontFace] = {}
        first: FontFace | None = None
        for face in faces:
            first = first or face
            style = classify_face(face.full_name, face.weight, face.is_italic)
            if style is None:
                logger.warning("Unsupported face style, skipping: %s", face.full_name)
                continue
            current = by_style.get(style)
            if current is not None:
                if _preference(face, name) <= _preference(current, name):
                    logger.debug("Duplicate %s face %s ignored", style, face.full_name)
                    continue
                logger.debug("Preferring %s over %s for %s", face.full_name, current.full_name, style)
            by_style[style] = face
        if first is None:
            raise FontNotFoundError(name or "<empty>", "No font faces supplied")
        return cls(name or first.family_name, by_style)

    @classmethod
    def from_files(cls, paths: Iterable[Path | str], name: str | None = None) -> FontFamily:
        """Build a family from explicit files.

        When no face classifies as regular, the first file's first face is
        registered as regular so explicitly chosen fonts always render.
        """
        faces: list[FontFace] = []
        for path in paths:
            faces.extend(_load_faces(Path(path)))
        family = cls.from_faces(faces, name)
        if FontStyle.REGULAR not in family._faces:
            logger.info("No regular face in %s; using %s as regular", family.name, faces[0].full_name)
            family._faces[FontStyle.REGULAR] = faces[0]
        return family

    @classmethod
    def from_system(cls, family_name: str) -> FontFamily:
        """Discover a family's faces with fontconfig.

        Raises:
            FontNotFoundError: If fontconfig knows no face for the family.
        """
        wanted = family_name.strip().lower()
        faces: list[FontFace] = []
        for path, index, families in sorted(_fc_list_entries(), key=lambda e: (str(e[0]), e[1])):
            if wanted not in families:
                continue
            try:
                faces.append(FontFace.load(path, index))
            except Exception as e:
                logger.warning("Failed to load %s:%d: %s", path, index, e)
        if not faces:
            raise FontNotFoundError(family_name)
        return cls.from_faces(faces, family_name)


def _preference(face: FontFace, name: str | None) -> tuple[bool, bool]:
    exact = name is not None and face.family_name.strip().lower() == name.strip().lower()
    return exact, face.width_class == NORMAL_WIDTH


def _load_faces(path: Path) -> list[FontFace]:
    if not path.is_file():
        raise FileNotFoundError(f"Font file not found: {path}")
    if path.suffix.lower() in COLLECTION_SUFFIXES:
        count = len(TTCollection(BytesIO(path.read_bytes()), lazy=True).fonts)
        return [FontFace.load(path, i) for i in range(count)]
    return [FontFace.load(path)]


def _run_fc_list(fmt: str) -> list[str]:
    try:
        result = subprocess.run(
            ["fc-list", f"--format={fmt}"],
            capture_output=True,
            text=True,
            timeout=FC_LIST_TIMEOUT,
        )
    except (FileNotFoundError, subprocess.TimeoutExpired) as e:
        logger.warning("fc-list unavailable: %s", e)
        return []
    if result.returncode != 0:
        logger.warning("fc-list failed with status %d", result.returncode)
        return []
    return result.stdout.splitlines()


def _fc_list_entries() -> list[tuple[Path, int, set[str]]]:
    """(path, face index, lowercase family names) for every installed face."""
    entries = []
    for line in _run_fc_list("%{file}|%{index}|%{family}\\n"):
        parts = line.split("|")
        if len(parts) < 3:
            continue
        path = Path(parts[0].strip())
        try:
            index = int(parts[1] or 0)
        except ValueError:
            index = 0
        families = {f.strip().lower() for f in parts[2].split(",") if f.strip()}
        entries.append((path, index, families))
    return entries


def list_families() -> list[str]:
    """Names of installed font families, sorted case-insensitively."""
    names: set[str] = set()
    for line in _run_fc_list("%{family}\\n"):
        for family in line.split(","):
            if family.strip():
                names.add(family.strip())
    return sorted(names, key=str.lower)
