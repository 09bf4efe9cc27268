"""
Tests for table definitions and seed data.

The seed rows are plain Python data, so their referential integrity and the
report results they should produce can be checked without a database.
"""

import re
from collections import Counter

import pytest

from schema.tables import RESET_ORDER, SPECS_BY_ENTITY, spec_for

_INSERT = re.compile(r"INSERT INTO (\w+)\s*\(([^)]*)\)", re.IGNORECASE)
_CREATE = re.compile(r"CREATE TABLE (\w+)", re.IGNORECASE)
_REFERENCES = re.compile(r"REFERENCES (\w+)", re.IGNORECASE)


def _seed_tables():
    """{lower table name: [row dict, ...]} across every entity."""
    tables = {}
    for spec in RESET_ORDER:
        for seed in spec.seeds:
            match = _INSERT.search(seed.insert_sql)
            name = match.group(1).lower()
            columns = [c.strip().lower() for c in match.group(2).split(",")]
            tables.setdefault(name, []).extend(dict(zip(columns, row)) for row in seed.rows)
    return tables


SEEDS = _seed_tables()


def _column(table, column):
    return {row[column] for row in SEEDS[table]}


class TestTableSpecs:

    def test_entities(self):
        assert [spec.entity for spec in RESET_ORDER] == [
            "country",
            "port",
            "warehouse",
            "homecountry",
            "foreigncountry",
            "tariff",
            "shippingroute",
            "ship",
            "company",
            "shipmentcontainer",
        ]
        assert set(SPECS_BY_ENTITY) == {spec.entity for spec in RESET_ORDER}

    def test_spec_for_unknown_entity(self):
        with pytest.raises(KeyError):
            spec_for("lighthouse")

    @pytest.mark.parametrize("spec", RESET_ORDER, ids=lambda s: s.entity)
    def test_ddl_creates_declared_tables(self, spec):
        created = tuple(_CREATE.search(ddl).group(1).lower() for ddl in spec.ddl)

        assert created == spec.tables

    @pytest.mark.parametrize("spec", RESET_ORDER, ids=lambda s: s.entity)
    def test_references_only_earlier_tables(self, spec):
        position = {table: i for i, s in enumerate(RESET_ORDER) for table in s.tables}
        own = RESET_ORDER.index(spec)

        for ddl in spec.ddl:
            for parent in _REFERENCES.findall(ddl):
                assert position[parent.lower()] <= own, parent

    def test_country_gdp_required(self):
        ddl = " ".join(spec_for("country").ddl[0].split())

        assert "GDP DOUBLE PRECISION NOT NULL" in ddl

    def test_seed_row_counts(self):
        counts = {name: len(rows) for name, rows in SEEDS.items()}

        assert counts == {
            "country": 9,
            "port": 5,
            "warehouse": 5,
            "homecountry": 8,
            "foreigncountry": 8,
            "tariff1": 25,
            "tariff2": 25,
            "shippingroute1": 5,
            "shippingroute2": 5,
            "ship1": 8,
            "ship2": 5,
            "company": 6,
            "shipmentcontainer1": 5,
            "shipmentcontainer2": 5,
        }

    def test_seed_row_count_property(self):
        assert spec_for("tariff").seed_row_count == 50
        assert spec_for("country").seed_row_count == 9


class TestSeedIntegrity:
    """Every seeded foreign key points at a seeded parent row"""

    def test_country_governments_unique(self):
        governments = [row["government"] for row in SEEDS["country"]]

        assert len(governments) == len(set(governments))

    def test_ports_belong_to_countries(self):
        assert _column("port", "countryname") <= _column("country", "name")

    def test_warehouses_within_capacity(self):
        for row in SEEDS["warehouse"]:
            assert 0 <= row["numcontainers"] <= row["capacity"]
        assert _column("warehouse", "portaddress") <= _column("port", "portaddress")

    def test_home_and_foreign_are_countries(self):
        countries = _column("country", "name")

        assert _column("homecountry", "name") <= countries
        assert _column("foreigncountry", "name") <= countries

    def test_tariff_halves_pair_up(self):
        key = ("enactmentdate", "tariffrate", "homename", "foreignname")
        first = {tuple(row[k] for k in key) for row in SEEDS["tariff1"]}
        second = {tuple(row[k] for k in key) for row in SEEDS["tariff2"]}

        assert first == second
        assert _column("tariff1", "homename") <= _column("homecountry", "name")
        assert _column("tariff1", "foreignname") <= _column("foreigncountry", "name")

    def test_shipping_routes(self):
        pairs = {(r["origincountryname"], r["terminalcountryname"]) for r in SEEDS["shippingroute1"]}

        for route in SEEDS["shippingroute2"]:
            assert (route["origincountryname"], route["terminalcountryname"]) in pairs
        assert _column("shippingroute1", "origincountryname") <= _column("foreigncountry", "name")
        assert _column("shippingroute1", "terminalcountryname") <= _column("country", "name")

    def test_ships(self):
        assert _column("ship1", "shippingroutename") <= _column("shippingroute2", "name")
        assert _column("ship1", "dockedatportaddress") <= _column("port", "portaddress")

    def test_ship_sizes_without_capacity_row(self):
        missing = _column("ship1", "shipsize") - _column("ship2", "shipsize")

        assert missing == {113.6, 85.5, 11.23}

    def test_companies_in_countries(self):
        assert _column("company", "countryname") <= _column("country", "name")

    def test_shipment_containers(self):
        ships = {(r["owner"], r["shipname"]) for r in SEEDS["ship1"]}
        sections = {(r["portaddress"], r["warehousesection"]) for r in SEEDS["warehouse"]}
        companies = {(r["ceo"], r["name"]) for r in SEEDS["company"]}

        for row in SEEDS["shipmentcontainer1"]:
            assert (row["shipowner"], row["shipname"]) in ships
            assert (row["portaddress"], row["warehousesection"]) in sections
        for row in SEEDS["shipmentcontainer2"]:
            assert (row["shipowner"], row["shipname"]) in ships
            assert (row["companyceo"], row["companyname"]) in companies
            assert row["tradeagreement"] in _column("tariff1", "tradeagreement")


class TestSeedReports:
    """What the reports should return against freshly seeded tables"""

    def test_gdp_distribution(self):
        def bucket(gdp):
            if gdp < 1:
                return "0-1"
            if gdp < 5:
                return "1-5"
            if gdp < 10:
                return "5-10"
            if gdp < 15:
                return "10-15"
            return "15+"

        counts = Counter(bucket(row["gdp"]) for row in SEEDS["country"])

        assert counts == {"1-5": 3, "5-10": 2, "10-15": 2, "15+": 2}

    def test_home_countries_trading_with_every_foreign_country(self):
        foreign = _column("foreigncountry", "name")
        pairs = {(r["homename"], r["foreignname"]) for r in SEEDS["tariff1"]}

        complete = {
            home for home in _column("homecountry", "name")
            if all((home, f) in pairs for f in foreign)
        }

        assert complete == {"Canada", "USA", "Japan"}

    def test_highest_average_container_value(self):
        values = {}
        for row in SEEDS["shipmentcontainer2"]:
            values.setdefault((row["shipowner"], row["shipname"]), []).append(row["goodvalue"])

        best = max(values, key=lambda ship: sum(values[ship]) / len(values[ship]))

        assert best == ("Maersk", "Ocean Breeze")
