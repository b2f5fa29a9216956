# careerpath/evaluators/linkedin_parser.py
"""
Best-effort extraction of public LinkedIn profile fields.

Each extractor tries an ordered chain of patterns and returns whatever the
first matching one yields. Unexpected markup gives ``None`` / empty lists,
never an exception. Tag stripping and entity decoding go through
BeautifulSoup.
"""
from __future__ import annotations

import re
from typing import List, Optional

from bs4 import BeautifulSoup

from careerpath.schemas.evaluation import Education, Experience, Skill

MAX_EXPERIENCES = 10
MAX_EDUCATION = 5
MAX_SKILLS = 20

_WS = re.compile(r"\s+")
_LI = re.compile(r"<li[^>]*>([\s\S]*?)</li>", re.I)

_ABOUT_PATTERNS = [
    re.compile(r'aria-label="About"[\s\S]{0,5000}?<p[^>]*>([\s\S]*?)</p>', re.I),
    re.compile(r'data-test-id="about-section"[\s\S]{0,5000}?<p[^>]*>([\s\S]*?)</p>', re.I),
    re.compile(r"<section[^>]*>\s*<h2[^>]*>\s*About\s*</h2>([\s\S]*?)</section>", re.I),
    re.compile(r"<div[^>]*>\s*<h2[^>]*>\s*About\s*</h2>([\s\S]*?)</div>", re.I),
    re.compile(r"About(?:</span>)?([\s\S]{0,2000}?)</p>", re.I),
]

_EXPERIENCE_BLOCKS = [
    re.compile(r'<section[^>]*aria-label="Experience"[^>]*>([\s\S]*?)</section>', re.I),
    re.compile(r'<section[^>]*data-test-id="experience-section"[^>]*>([\s\S]*?)</section>', re.I),
    re.compile(r"Experience(?:</span>)?([\s\S]{0,10000}?)</section>", re.I),
]

_EDUCATION_BLOCKS = [
    re.compile(r'<section[^>]*aria-label="Education"[^>]*>([\s\S]*?)</section>', re.I),
    re.compile(r'<section[^>]*data-test-id="education-section"[^>]*>([\s\S]*?)</section>', re.I),
    re.compile(r"Education(?:</span>)?([\s\S]{0,5000}?)</section>", re.I),
]

_SKILL_BLOCKS = [
    re.compile(r'<section[^>]*aria-label="Skills"[^>]*>([\s\S]*?)</section>', re.I),
    re.compile(r'<section[^>]*data-test-id="skills-section"[^>]*>([\s\S]*?)</section>', re.I),
    re.compile(r"Skills(?:</span>)?([\s\S]{0,5000}?)</section>", re.I),
]

_TITLE = re.compile(r"<h3[^>]*>([\s\S]{2,150}?)</h3>", re.I)
_SUBTITLE = re.compile(r"<h4[^>]*>([\s\S]{2,150}?)</h4>", re.I)
_LINK_TEXT = re.compile(r"<a[^>]*>([\s\S]{2,150}?)</a>", re.I)
_SPAN_OR_DIV = re.compile(r"<(?:span|div)[^>]*>([^<]{2,150}?)</(?:span|div)>", re.I)
_FIELD_OF_STUDY = re.compile(r'<(?:div|span)[^>]*class="[^"]*field-of-study[^"]*"[^>]*>([\s\S]{2,150}?)</(?:div|span)>', re.I)
_PERIOD = re.compile(r"\b\d{4}\b[\s\S]{0,80}?(?:\b\d{4}\b|Present|Current)", re.I)
_DURATION = re.compile(r"\b\d+\s*(?:years?|yrs?)(?:\s*\d+\s*(?:months?|mos?))?|\b\d+\s*(?:months?|mos?)\b", re.I)
_SKILL_NAME = re.compile(
    r'<(?:span[^>]*|div[^>]*class="[^"]*skill-name[^"]*"[^>]*)>([^<]{2,100}?)</(?:span|div)>', re.I
)
_ENDORSEMENTS = re.compile(r"\b(\d+)\s*endorsements?\b", re.I)
_LINKEDIN_SUFFIX = re.compile(r"\s*[|\-]\s*LinkedIn.*$", re.I)


def clean(fragment: Optional[str]) -> Optional[str]:
    """Strip tags, decode entities and collapse whitespace; ``None`` if nothing is left."""
    if not fragment:
        return None
    text = BeautifulSoup(fragment, "html.parser").get_text(" ")
    text = _WS.sub(" ", text).strip()
    return text or None


def _first_group(pattern: re.Pattern, text: str) -> Optional[str]:
    m = pattern.search(text)
    return clean(m.group(1)) if m else None


def _first_block(patterns: List[re.Pattern], html: str) -> Optional[str]:
    for p in patterns:
        m = p.search(html)
        if m:
            return m.group(1) or m.group(0)
    return None


def _meta(soup: BeautifulSoup, key: str, value: str) -> Optional[str]:
    tag = soup.find("meta", attrs={key: value})
    if tag is None:
        return None
    return clean(tag.get("content"))


def extract_name(soup: BeautifulSoup) -> Optional[str]:
    name = _meta(soup, "property", "og:title") or _meta(soup, "name", "title")
    if not name and soup.title and soup.title.string:
        name = clean(soup.title.string)
    if name:
        name = _LINKEDIN_SUFFIX.sub("", name).strip() or None
    return name


def extract_headline(soup: BeautifulSoup) -> Optional[str]:
    return _meta(soup, "name", "description") or _meta(soup, "property", "og:description")


def extract_about(html: str) -> Optional[str]:
    for p in _ABOUT_PATTERNS:
        m = p.search(html)
        if m:
            about = clean(m.group(1))
            if about:
                return about
    return None


def extract_experiences(html: str) -> List[Experience]:
    block = _first_block(_EXPERIENCE_BLOCKS, html)
    if not block:
        return []
    out: List[Experience] = []
    for item in _LI.findall(block)[:MAX_EXPERIENCES]:
        title = _first_group(_TITLE, item) or _first_group(_SPAN_OR_DIV, item)
        company = _first_group(_SUBTITLE, item) or _first_group(_LINK_TEXT, item)
        text = clean(item) or ""
        period_m = _PERIOD.search(text)
        duration_m = _DURATION.search(text)
        exp = Experience(
            title=title,
            company=company,
            period=period_m.group(0) if period_m else None,
            duration=duration_m.group(0) if duration_m else None,
        )
        if exp.title or exp.company or exp.period:
            out.append(exp)
    return out


def extract_education(html: str) -> List[Education]:
    block = _first_block(_EDUCATION_BLOCKS, html)
    if not block:
        return []
    out: List[Education] = []
    for item in _LI.findall(block)[:MAX_EDUCATION]:
        text = clean(item) or ""
        period_m = _PERIOD.search(text)
        edu = Education(
            institution=_first_group(_TITLE, item) or _first_group(_SPAN_OR_DIV, item),
            degree=_first_group(_SUBTITLE, item),
            field=_first_group(_FIELD_OF_STUDY, item),
            period=period_m.group(0) if period_m else None,
        )
        if edu.institution or edu.degree or edu.field:
            out.append(edu)
    return out


def _skill_from_fragment(fragment: str) -> Optional[Skill]:
    name = _first_group(_SKILL_NAME, fragment) or clean(fragment)
    if not name or len(name) < 2 or _ENDORSEMENTS.fullmatch(name):
        return None
    m = _ENDORSEMENTS.search(clean(fragment) or "")
    return Skill(name=name, endorsements=int(m.group(1)) if m else 0)


def extract_skills(html: str) -> List[Skill]:
    block = _first_block(_SKILL_BLOCKS, html)
    if not block:
        return []
    # one <li> per skill when the list markup is there, bare spans otherwise
    fragments = _LI.findall(block) or [m.group(0) for m in _SKILL_NAME.finditer(block)]
    out: List[Skill] = []
    for fragment in fragments:
        skill = _skill_from_fragment(fragment)
        if skill:
            out.append(skill)
        if len(out) >= MAX_SKILLS:
            break
    return out
