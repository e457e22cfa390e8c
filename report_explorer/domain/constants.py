"""Domain constants for the report explorer."""

from .models.reports import AssetDef

SCENARIOS = ("Base Case", "Optimistic", "Pessimistic", "Stress Test")
METRICS = ("Revenue", "EBITDA", "Net Income", "Cash Flow", "Headcount")

# Unlisted scenarios project at the base factor.
SCENARIO_FACTORS = {
    "Base Case": 1.0,
    "Optimistic": 1.12,
    "Pessimistic": 0.88,
    "Stress Test": 0.72,
}
DEFAULT_SCENARIO_FACTOR = 1.0

ALL_SECTORS_LABEL = "All Sectors"

ASSET_TAXONOMY = (
    AssetDef("Equities", "Developed", "US Large Cap"),
    AssetDef("Equities", "Developed", "US Mid Cap"),
    AssetDef("Equities", "Developed", "US Small Cap"),
    AssetDef("Equities", "Developed", "European Equities"),
    AssetDef("Equities", "Developed", "Japan Equities"),
    AssetDef("Equities", "Developed", "Australia / NZ Equities"),
    AssetDef("Equities", "Emerging", "EM Asia"),
    AssetDef("Equities", "Emerging", "EM Latin America"),
    AssetDef("Equities", "Emerging", "EM EMEA"),
    AssetDef("Equities", "Emerging", "Frontier Markets"),
    AssetDef("Equities", "Emerging", "China A-Shares"),
    AssetDef("Fixed Income", "Government", "US Treasuries"),
    AssetDef("Fixed Income", "Government", "Sovereign Debt (ex-US)"),
    AssetDef("Fixed Income", "Government", "TIPS / Inflation-Linked"),
    AssetDef("Fixed Income", "Government", "Agency Bonds"),
    AssetDef("Fixed Income", "Corporate", "Investment Grade"),
    AssetDef("Fixed Income", "Corporate", "High Yield"),
    AssetDef("Fixed Income", "Corporate", "Convertible Bonds"),
    AssetDef("Fixed Income", "Structured", "MBS / Agency"),
    AssetDef("Fixed Income", "Structured", "ABS / Consumer"),
    AssetDef("Fixed Income", "Structured", "CLOs"),
    AssetDef("Alternatives", "Real Assets", "Real Estate (REIT)"),
    AssetDef("Alternatives", "Real Assets", "Infrastructure"),
    AssetDef("Alternatives", "Real Assets", "Commodities"),
    AssetDef("Alternatives", "Real Assets", "Timberland / Farmland"),
    AssetDef("Alternatives", "Private", "Private Equity — Buyout"),
    AssetDef("Alternatives", "Private", "Private Equity — Growth"),
    AssetDef("Alternatives", "Private", "Venture Capital"),
    AssetDef("Alternatives", "Private", "Private Credit"),
    AssetDef("Alternatives", "Hedge Funds", "Long / Short Equity"),
    AssetDef("Alternatives", "Hedge Funds", "Global Macro"),
    AssetDef("Alternatives", "Hedge Funds", "Event Driven"),
    AssetDef("Cash", "Liquid", "Cash & Equivalents"),
    AssetDef("Cash", "Liquid", "Money Market Funds"),
)


__all__ = [
    "SCENARIOS",
    "METRICS",
    "SCENARIO_FACTORS",
    "DEFAULT_SCENARIO_FACTOR",
    "ALL_SECTORS_LABEL",
    "ASSET_TAXONOMY",
]
