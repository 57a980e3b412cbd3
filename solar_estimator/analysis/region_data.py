# solar_estimator/analysis/region_data.py

# Static tariff / subsidy / tax credit table, one record per state or district.
# Districts reference their state through parent_id.
REGIONS = [
    {
        "id": "ca",
        "name": "California",
        "electricity_rate": 0.23,
        "solar_subsidy": 0.05,
        "tax_credit": 0.30,
        "type": "state",
    },
    {
        "id": "ny",
        "name": "New York",
        "electricity_rate": 0.19,
        "solar_subsidy": 0.04,
        "tax_credit": 0.25,
        "type": "state",
    },
    {
        "id": "tx",
        "name": "Texas",
        "electricity_rate": 0.12,
        "solar_subsidy": 0.02,
        "tax_credit": 0.30,
        "type": "state",
    },
    {
        "id": "fl",
        "name": "Florida",
        "electricity_rate": 0.14,
        "solar_subsidy": 0.03,
        "tax_credit": 0.30,
        "type": "state",
    },
    {
        "id": "az",
        "name": "Arizona",
        "electricity_rate": 0.13,
        "solar_subsidy": 0.10,
        "tax_credit": 0.30,
        "type": "state",
    },
    {
        "id": "co",
        "name": "Colorado",
        "electricity_rate": 0.13,
        "solar_subsidy": 0.05,
        "tax_credit": 0.30,
        "type": "state",
    },
    {
        "id": "nv",
        "name": "Nevada",
        "electricity_rate": 0.12,
        "solar_subsidy": 0.07,
        "tax_credit": 0.30,
        "type": "state",
    },
    {
        "id": "wa",
        "name": "Washington",
        "electricity_rate": 0.10,
        "solar_subsidy": 0.03,
        "tax_credit": 0.30,
        "type": "state",
    },
    # Districts
    {
        "id": "ca-la",
        "name": "Los Angeles County",
        "electricity_rate": 0.25,
        "solar_subsidy": 0.06,
        "tax_credit": 0.30,
        "type": "district",
        "parent_id": "ca",
    },
    {
        "id": "ca-sd",
        "name": "San Diego County",
        "electricity_rate": 0.31,
        "solar_subsidy": 0.05,
        "tax_credit": 0.30,
        "type": "district",
        "parent_id": "ca",
    },
    {
        "id": "ca-sf",
        "name": "San Francisco County",
        "electricity_rate": 0.28,
        "solar_subsidy": 0.04,
        "tax_credit": 0.30,
        "type": "district",
        "parent_id": "ca",
    },
    {
        "id": "ny-kings",
        "name": "Kings County",
        "electricity_rate": 0.22,
        "solar_subsidy": 0.05,
        "tax_credit": 0.25,
        "type": "district",
        "parent_id": "ny",
    },
    {
        "id": "ny-erie",
        "name": "Erie County",
        "electricity_rate": 0.16,
        "solar_subsidy": 0.04,
        "tax_credit": 0.25,
        "type": "district",
        "parent_id": "ny",
    },
    {
        "id": "tx-harris",
        "name": "Harris County",
        "electricity_rate": 0.13,
        "solar_subsidy": 0.02,
        "tax_credit": 0.30,
        "type": "district",
        "parent_id": "tx",
    },
    {
        "id": "tx-travis",
        "name": "Travis County",
        "electricity_rate": 0.11,
        "solar_subsidy": 0.03,
        "tax_credit": 0.30,
        "type": "district",
        "parent_id": "tx",
    },
]
