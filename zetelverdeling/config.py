"""Verkiezingsconstanten voor de Tweede Kamer, kleuren en logo's van partijen.

Tweede Kamerverkiezingen :
  - 150 zetels, landelijk verdeeld met de methode D'Hondt
  - Resultaten komen van de REST-backend (TK2021, TK2023, TK2025)
"""

from __future__ import annotations

import os
from types import MappingProxyType
from typing import List, Mapping, Optional


# ---------------------------------------------------------------------------
# Tweede Kamer
# ---------------------------------------------------------------------------

TOTAL_SEATS = 150
MAJORITY_SEATS = (TOTAL_SEATS // 2) + 1  # 76

AVAILABLE_ELECTIONS: List[str] = ["TK2025", "TK2023", "TK2021"]
DEFAULT_ELECTION = AVAILABLE_ELECTIONS[0]


# ---------------------------------------------------------------------------
# Backend
# ---------------------------------------------------------------------------

API_BASE_URL = os.environ.get("ZETELVERDELING_API_URL", "http://localhost:8080/api")
API_TIMEOUT = 30  # seconden

# Logo's staan als statische bestanden bij de webfrontend
LOGO_BASE_URL = os.environ.get("ZETELVERDELING_LOGO_URL", "http://localhost:5173")


# ---------------------------------------------------------------------------
# Partijkleuren
# ---------------------------------------------------------------------------

DEFAULT_PARTY_COLOR = "#6B7280"

PARTY_COLORS: Mapping[str, str] = MappingProxyType({
    # Grote en bestaande partijen
    "VVD": "#FF6600",
    "PVV (Partij voor de Vrijheid)": "#00529F",
    "CDA": "#00A54F",
    "D66": "#00A03E",
    "GROENLINKS": "#228B22",
    "GROENLINKS / Partij van de Arbeid (PvdA)": "#DC143C",
    "SP (Socialistische Partij)": "#FF0000",
    "Partij van de Arbeid (P.v.d.A.)": "#DF111A",
    "ChristenUnie": "#00A7EB",
    "Partij voor de Dieren": "#006F3F",
    "50PLUS": "#8B008B",
    "Staatkundig Gereformeerde Partij (SGP)": "#FE7D00",
    "DENK": "#00CCCC",
    "Forum voor Democratie": "#800020",
    "Volt": "#502379",
    "JA21": "#1C39BB",
    "BIJ1": "#FFED00",
    "BBB": "#5BB12F",
    "Nieuw Sociaal Contract": "#00A3E0",
    "Nieuw Sociaal Contract (NSC)": "#00A3E0",
    "Piratenpartij - De Groenen": "#660099",
    "Splinter": "#FF6B35",
    "Samen voor Nederland": "#FF8C00",
    "LP (Libertaire Partij)": "#FFD700",
    "LEF - Voor de Nieuwe Generatie": "#00CED1",
    "Nederland met een PLAN": "#4682B4",
    "PartijvdSport": "#32CD32",
    "Politieke Partij voor Basisinkomen": "#9370DB",
    "BVNL / Groep Van Haga": "#1E3A8A",
    "Belang Van Nederland (BVNL)": "#1E3A8A",
    # Geregistreerd in 2021
    "CODE ORANJE": "#FFA500",
    "Piratenpartij": "#660099",
    "NIDA": "#00ADAF",
    "NLBeter": "#242B5C",
    "OPRECHT": "#203E5F",
    "JONG": "#2B2E83",
    "Lijst Henk Krol": "#F0C300",
    "JEZUS LEEFT": "#FF00FF",
    "U-Buntu Connected Front": "#000000",
    "Trots op Nederland (TROTS)": "#000080",
    "Blanco (Zeven, A.J.L.B.)": "#A9A9A9",
    "DE FEESTPARTIJ (DFP)": "#FF69B4",
    "Partij van de Eenheid": "#006400",
    "Vrij en Sociaal Nederland": "#008080",
    "Wij zijn Nederland": "#1F2937",
    "Modern Nederland": "#3B82F6",
    "De Groenen": "#00FF00",
    "Partij voor de Republiek": "#C0C0C0",
    # Nieuw in 2025
    "Vrede voor Dieren": "#228B22",
    "FNP": "#FFD700",
    "Vrij Verbond": "#87CEEB",
    "DE LINIE": "#2F4F4F",
    "NL PLAN": "#4682B4",
    "ELLECT": "#DA70D6",
    "Partij voor de Rechtsstaat": "#1B4D3E",
})


# ---------------------------------------------------------------------------
# Partijlogo's (relatieve paden onder /logos)
# ---------------------------------------------------------------------------

PARTY_LOGOS: Mapping[str, str] = MappingProxyType({
    "VVD": "/logos/vvd.png",
    "D66": "/logos/d66.png",
    "PVV (Partij voor de Vrijheid)": "/logos/pvv.png",
    "GROENLINKS / Partij van de Arbeid (PvdA)": "/logos/gl-pvda.png",
    "CDA": "/logos/cda.png",
    "SP (Socialistische Partij)": "/logos/sp.png",
    "Forum voor Democratie": "/logos/fvd.png",
    "Partij voor de Dieren": "/logos/pvdd.png",
    "ChristenUnie": "/logos/cu.png",
    "Volt": "/logos/volt.png",
    "JA21": "/logos/ja21.png",
    "Staatkundig Gereformeerde Partij (SGP)": "/logos/sgp.png",
    "DENK": "/logos/denk.png",
    "50PLUS": "/logos/50plus.png",
    "BBB": "/logos/bbb.png",
    "BIJ1": "/logos/bij1.png",
    "Nieuw Sociaal Contract": "/logos/nsc.png",
    "Nieuw Sociaal Contract (NSC)": "/logos/nsc.png",
    "BVNL / Groep Van Haga": "/logos/bvnl.png",
    "Belang Van Nederland (BVNL)": "/logos/bvnl.png",
    "Piratenpartij - De Groenen": "/logos/piratenpartij.png",
    "Splinter": "/logos/splinter.png",
    "Samen voor Nederland": "/logos/samenvoornederland.png",
    "LP (Libertaire Partij)": "/logos/lp.png",
    "LEF - Voor de Nieuwe Generatie": "/logos/lef.png",
    "Nederland met een PLAN": "/logos/plan.png",
    "PartijvdSport": "/logos/pvds.png",
    "Politieke Partij voor Basisinkomen": "/logos/basisinkomen.png",
    "CODE ORANJE": "/logos/code-oranje.png",
    "Piratenpartij": "/logos/piratenpartij.png",
    "NIDA": "/logos/nida.png",
    "NLBeter": "/logos/nlbeter.png",
    "Lijst Henk Krol": "/logos/henk-krol.png",
    "JONG": "/logos/jong.png",
    "NL PLAN": "/logos/plan.png",
})


def get_party_color(party_name: str) -> str:
    """Retourneert de hex-kleur van een partij, grijs als de naam onbekend is."""
    return PARTY_COLORS.get(party_name, DEFAULT_PARTY_COLOR)


def get_party_logo(party_name: str) -> Optional[str]:
    """Retourneert het logopad van een partij, of None."""
    return PARTY_LOGOS.get(party_name)


def get_party_logo_url(party_name: str) -> Optional[str]:
    """Volledige URL van het partijlogo, of None."""
    path = get_party_logo(party_name)
    return f"{LOGO_BASE_URL.rstrip('/')}{path}" if path else None
