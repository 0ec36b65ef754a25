"""
Concept taxonomy — static keyword and concept table per scenario category.

Each category carries an ordered tuple of lowercase keywords (lexical signals)
and an ordered tuple of concept descriptions (security controls a good answer
should cover). The table is built once at import and exposed read-only.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from infosec_quiz.core.exceptions import TaxonomyError


class ScenarioCategory(str, Enum):
    PHISHING = "phishing"
    RANSOMWARE = "ransomware"
    PASSWORD = "password"
    DATABASE = "database"
    SUPPLY_CHAIN = "supplyChain"
    NETWORK = "network"
    INSIDER = "insider"
    VULNERABILITY = "vulnerability"
    PHYSICAL = "physical"
    MOBILE = "mobile"


@dataclass(frozen=True)
class ConceptEntry:
    """Keywords and concepts for one category."""

    category: ScenarioCategory
    keywords: tuple[str, ...]
    concepts: tuple[str, ...]

    def to_dict(self) -> dict[str, object]:
        return {
            "category": self.category.value,
            "keywords": list(self.keywords),
            "concepts": list(self.concepts),
        }


def _entry(category: ScenarioCategory, keywords: list[str], concepts: list[str]) -> ConceptEntry:
    return ConceptEntry(category=category, keywords=tuple(keywords), concepts=tuple(concepts))


_ENTRIES = (
    _entry(
        ScenarioCategory.PHISHING,
        ["phishing", "email", "verify", "domain", "authentic", "social engineering", "awareness", "training"],
        [
            "Email verification and authentication",
            "Security awareness training",
            "Verification of requests through secondary channels",
            "Email filtering and anti-phishing tools",
        ],
    ),
    _entry(
        ScenarioCategory.RANSOMWARE,
        ["ransomware", "backup", "patch", "update", "segmentation", "air-gap", "antivirus", "endpoint", "malware"],
        [
            "Regular security patches and updates",
            "Air-gapped or offline backup systems",
            "Network segmentation",
            "Endpoint protection and antivirus",
        ],
    ),
    _entry(
        ScenarioCategory.PASSWORD,
        ["password", "mfa", "multi-factor", "authentication", "2fa", "unique", "password manager", "credential"],
        [
            "Multi-factor authentication (MFA)",
            "Unique passwords for each account",
            "Password managers",
            "Regular password rotation",
        ],
    ),
    _entry(
        ScenarioCategory.DATABASE,
        [
            "database",
            "misconfiguration",
            "access control",
            "authentication",
            "encryption",
            "audit",
            "monitoring",
            "security review",
        ],
        [
            "Proper access controls and authentication",
            "Regular security audits",
            "Encryption at rest and in transit",
            "Configuration management and review processes",
        ],
    ),
    _entry(
        ScenarioCategory.SUPPLY_CHAIN,
        [
            "supply chain",
            "vendor",
            "third-party",
            "code review",
            "integrity",
            "verification",
            "trusted source",
            "vetting",
        ],
        [
            "Vendor security assessment",
            "Code signing and integrity verification",
            "Build process security controls",
            "Trusted software sources",
        ],
    ),
    _entry(
        ScenarioCategory.NETWORK,
        ["vpn", "encryption", "tls", "ssl", "public wifi", "man-in-the-middle", "mitm", "network security"],
        [
            "VPN usage on public networks",
            "Encrypted connections (TLS/SSL)",
            "Avoiding sensitive operations on untrusted networks",
            "Network security awareness",
        ],
    ),
    _entry(
        ScenarioCategory.INSIDER,
        ["insider", "access control", "dlp", "monitoring", "offboarding", "least privilege", "data loss"],
        [
            "Data Loss Prevention (DLP) tools",
            "Access control and least privilege",
            "Proper offboarding procedures",
            "User activity monitoring",
        ],
    ),
    _entry(
        ScenarioCategory.VULNERABILITY,
        [
            "vulnerability",
            "patch",
            "update",
            "cve",
            "emergency",
            "critical",
            "vulnerability management",
            "scanning",
        ],
        [
            "Timely patch management",
            "Vulnerability scanning and assessment",
            "Emergency patching procedures for critical vulnerabilities",
            "Patch testing and deployment processes",
        ],
    ),
    _entry(
        ScenarioCategory.PHYSICAL,
        [
            "physical",
            "tailgating",
            "badge",
            "access control",
            "visitor",
            "security guard",
            "authentication",
            "mantra",
        ],
        [
            "Physical access controls",
            "Anti-tailgating policies and training",
            "Visitor management procedures",
            "Security awareness for physical security",
        ],
    ),
    _entry(
        ScenarioCategory.MOBILE,
        ["mobile", "app", "permission", "mdm", "device management", "byod", "app store", "vetting", "sandbox"],
        [
            "Mobile Device Management (MDM)",
            "App vetting and approval processes",
            "Permission reviews and least privilege",
            "BYOD security policies",
        ],
    ),
)

SECURITY_CONCEPTS: Mapping[ScenarioCategory, ConceptEntry] = MappingProxyType(
    {entry.category: entry for entry in _ENTRIES}
)


def get_concepts(category: ScenarioCategory | str) -> ConceptEntry:
    """Return the taxonomy entry for a category (enum member or its string value)."""
    return SECURITY_CONCEPTS[ScenarioCategory(category)]


def validate_taxonomy(table: Mapping[ScenarioCategory, ConceptEntry] = SECURITY_CONCEPTS) -> None:
    """
    Check the taxonomy invariants.

    Every category must have an entry with at least one keyword and one
    concept; keywords must be lowercase and unique within their entry.

    Raises:
        TaxonomyError: on the first violation found.
    """
    for category in ScenarioCategory:
        entry = table.get(category)
        if entry is None:
            raise TaxonomyError(f"Missing taxonomy entry for {category.value}")
        if not entry.keywords:
            raise TaxonomyError(f"{category.value}: keyword list is empty")
        if not entry.concepts:
            raise TaxonomyError(f"{category.value}: concept list is empty")
        if len(set(entry.keywords)) != len(entry.keywords):
            raise TaxonomyError(f"{category.value}: duplicate keywords")
        for keyword in entry.keywords:
            if keyword != keyword.lower():
                raise TaxonomyError(f"{category.value}: keyword {keyword!r} is not lowercase")
