"""Resolution rules for geographic and user group exceptions."""

# Rule names for reference in tests and capability listings
RULE_COUNTRY_INCLUDE_WINS = "country include: explicit country inclusion overrides every region decision"
RULE_COUNTRY_EXCLUDE_OVER_REGION = "country exclude: explicit country exclusion overrides region inclusion"
RULE_REGION_EXCLUDE_OVER_INCLUDE = "region exclude: region exclusion beats region inclusion for the same country"
RULE_OPPOSITE_COUNTRIES = "opposite countries: only country exclusions given -> all other countries included, include not persisted"
RULE_OPPOSITE_REGIONS = "opposite regions: only region exclusions given -> all other regions included, include not persisted"
RULE_OPPOSITE_USERGROUPS = "opposite usergroups: only exclusions given -> all other usergroups included, include persisted verbatim"
RULE_DEFAULT_NOT_ALLOWED = "default: ids absent from the whitelist are not allowed"

GEOGRAPHIC_RULES = (
    RULE_COUNTRY_INCLUDE_WINS,
    RULE_COUNTRY_EXCLUDE_OVER_REGION,
    RULE_REGION_EXCLUDE_OVER_INCLUDE,
    RULE_OPPOSITE_COUNTRIES,
    RULE_OPPOSITE_REGIONS,
    RULE_DEFAULT_NOT_ALLOWED,
)

USERGROUP_RULES = (
    RULE_OPPOSITE_USERGROUPS,
    RULE_DEFAULT_NOT_ALLOWED,
)
