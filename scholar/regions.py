"""
Region profiles.

Maps a country code to the conventions of that job market: phone and
location formats, well-known employers used as examples in prompts and
fallbacks, and the resume style recruiters there expect.

Constant data. Unknown or missing countries resolve to "global".
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class RegionProfile:
    code: str
    market_name: str
    phone_format: str
    location_format: str
    companies: Tuple[str, ...]
    resume_style: str


GLOBAL_REGION = RegionProfile(
    code="global",
    market_name="global",
    phone_format="+1 XXX-XXX-XXXX",
    location_format="City, Country",
    companies=("Google", "Microsoft", "Amazon", "Accenture", "Deloitte"),
    resume_style="Concise one-page resume, reverse-chronological, no photo",
)

_REGIONS: Dict[str, RegionProfile] = {
    "US": RegionProfile(
        code="US",
        market_name="United States",
        phone_format="+1 (XXX) XXX-XXXX",
        location_format="City, State",
        companies=("Google", "Microsoft", "Amazon", "Meta", "Apple"),
        resume_style="One-page US resume, no photo, no date of birth, quantified bullet points",
    ),
    "UK": RegionProfile(
        code="UK",
        market_name="United Kingdom",
        phone_format="+44 XXXX XXXXXX",
        location_format="City, United Kingdom",
        companies=("Revolut", "Monzo", "Deliveroo", "BT Group", "Arm"),
        resume_style="Two-page UK CV with a personal statement, no photo",
    ),
    "CA": RegionProfile(
        code="CA",
        market_name="Canada",
        phone_format="+1 (XXX) XXX-XXXX",
        location_format="City, Province",
        companies=("Shopify", "RBC", "TD Bank", "Wealthsimple", "OpenText"),
        resume_style="One to two page Canadian resume, no photo, bilingual skills highlighted",
    ),
    "IN": RegionProfile(
        code="IN",
        market_name="Indian",
        phone_format="+91 XXXXXXXXXX",
        location_format="City, State, India",
        companies=("TCS", "Infosys", "Flipkart", "Zomato", "Razorpay"),
        resume_style="ATS-friendly one-page resume with CGPA, projects and certifications",
    ),
    "DE": RegionProfile(
        code="DE",
        market_name="German",
        phone_format="+49 XXX XXXXXXXX",
        location_format="City, Germany",
        companies=("SAP", "Siemens", "Zalando", "N26", "Bosch"),
        resume_style="Tabular Lebenslauf, precise dates, language levels (CEFR) listed",
    ),
    "AU": RegionProfile(
        code="AU",
        market_name="Australian",
        phone_format="+61 X XXXX XXXX",
        location_format="City, State, Australia",
        companies=("Atlassian", "Canva", "Commonwealth Bank", "Telstra", "Xero"),
        resume_style="Two to three page Australian resume with career objective and referees",
    ),
    "FR": RegionProfile(
        code="FR",
        market_name="French",
        phone_format="+33 X XX XX XX XX",
        location_format="City, France",
        companies=("Capgemini", "Dassault Systemes", "BlaBlaCar", "Doctolib", "Thales"),
        resume_style="One-page French CV, language levels and education first",
    ),
    "SG": RegionProfile(
        code="SG",
        market_name="Singapore",
        phone_format="+65 XXXX XXXX",
        location_format="Singapore",
        companies=("Grab", "Shopee", "DBS Bank", "Sea Group", "GovTech"),
        resume_style="Two-page resume with availability and work-pass status",
    ),
    "AE": RegionProfile(
        code="AE",
        market_name="UAE",
        phone_format="+971 XX XXX XXXX",
        location_format="City, United Arab Emirates",
        companies=("Careem", "Emirates Group", "Noon", "Etisalat", "ADNOC"),
        resume_style="Two-page resume with nationality and visa status, photo optional",
    ),
    "NL": RegionProfile(
        code="NL",
        market_name="Dutch",
        phone_format="+31 X XXXXXXXX",
        location_format="City, Netherlands",
        companies=("Booking.com", "Adyen", "ASML", "Philips", "ING"),
        resume_style="Direct two-page CV, skills and results up front",
    ),
    "SE": RegionProfile(
        code="SE",
        market_name="Swedish",
        phone_format="+46 XX XXX XX XX",
        location_format="City, Sweden",
        companies=("Spotify", "Klarna", "Ericsson", "King", "Volvo"),
        resume_style="Modest two-page CV with a short personal profile",
    ),
    "IE": RegionProfile(
        code="IE",
        market_name="Irish",
        phone_format="+353 XX XXX XXXX",
        location_format="City, Ireland",
        companies=("Stripe", "Intercom", "Workday", "Google Dublin", "Accenture Ireland"),
        resume_style="Two-page CV with a personal profile and references on request",
    ),
    "NZ": RegionProfile(
        code="NZ",
        market_name="New Zealand",
        phone_format="+64 XX XXX XXXX",
        location_format="City, New Zealand",
        companies=("Xero", "Rocket Lab", "Fisher & Paykel", "Spark", "Trade Me"),
        resume_style="Two to three page CV with career objective and referees",
    ),
    "JP": RegionProfile(
        code="JP",
        market_name="Japanese",
        phone_format="+81 XX-XXXX-XXXX",
        location_format="City, Prefecture, Japan",
        companies=("Rakuten", "Sony", "Mercari", "LINE Yahoo", "Fujitsu"),
        resume_style="Structured rirekisho-style resume with education history and certifications",
    ),
    "BR": RegionProfile(
        code="BR",
        market_name="Brazilian",
        phone_format="+55 XX XXXXX-XXXX",
        location_format="City, State, Brazil",
        companies=("Nubank", "iFood", "Mercado Livre", "Stone", "Itau"),
        resume_style="Two-page curriculo with objective and language proficiency",
    ),
}

_ALIASES: Dict[str, str] = {
    "INDIA": "IN",
    "GB": "UK",
    "USA": "US",
    "GLOBAL": "global",
}

# Inputs accepted by request validation (codes, aliases and "global").
SUPPORTED_COUNTRIES: Tuple[str, ...] = tuple(_REGIONS) + ("India", "global")


def resolve_region(country: Any) -> RegionProfile:
    """
    Return the region profile for a country code, defaulting to global.

    Accepts any value: profiles are loosely typed, so anything that is not
    a non-empty string resolves to the global profile.
    """
    if not isinstance(country, str) or not country.strip():
        return GLOBAL_REGION
    key = country.strip().upper()
    key = _ALIASES.get(key, key)
    return _REGIONS.get(key, GLOBAL_REGION)
