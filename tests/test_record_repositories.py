"""
Tests for the multi-table writes in the country, trade and shipping repositories.
"""

import asyncio
from datetime import date

import pytest

from core.errors import CapacityError, DuplicateValueError, RecordNotFoundError
from countries import repository as countries
from shipping import repository as shipping
from trade import repository as trade

CANADA = dict(
    name="Canada",
    population=39000000,
    government="Liberal Party - Mark Carney",
    gdp=2.2,
    port_address="999 Canada Pl, Vancouver, BC V6C 3T4",
)


class TestUpdateCountryEverywhere:

    def test_updates_all_three_tables(self, fake_conn):
        asyncio.run(countries.update_country_everywhere(**CANADA))

        updates = [sql.split()[1] for sql in fake_conn.sql() if sql.startswith("UPDATE")]
        assert updates == ["Country", "HomeCountry", "ForeignCountry"]
        assert fake_conn.commits == 1

    def test_collision_excludes_same_country(self, fake_conn):
        asyncio.run(countries.update_country_everywhere(**CANADA))

        sql, args = fake_conn.statements[0]
        assert "Name <> $2" in sql
        assert args == (CANADA["government"], "Canada")

    def test_government_taken(self, fake_conn):
        fake_conn.fetchrow_results = [{"taken": 1}]

        with pytest.raises(DuplicateValueError):
            asyncio.run(countries.update_country_everywhere(**CANADA))

        assert not [sql for sql in fake_conn.sql() if sql.startswith("UPDATE")]

    def test_missing_copy_rolls_back(self, fake_conn):
        fake_conn.execute_results = ["UPDATE 1", "UPDATE 0"]

        with pytest.raises(RecordNotFoundError):
            asyncio.run(countries.update_country_everywhere(**{**CANADA, "name": "UK"}))

        assert fake_conn.rollbacks == 1
        assert fake_conn.commits == 0


class TestInsertHomeCountry:

    def test_writes_home_foreign_and_country(self, fake_conn):
        fake_conn.execute_results = ["INSERT 0 1", "INSERT 0 1", "UPDATE 1"]

        asyncio.run(countries.insert_home_country(**CANADA))

        sql = fake_conn.sql()
        assert sql[0].startswith("INSERT INTO HomeCountry")
        assert sql[1].startswith("INSERT INTO ForeignCountry")
        assert fake_conn.statements[1][1][-1] == countries.DEFAULT_DOCKING_FEE
        assert sql[2].startswith("UPDATE Country")

    def test_unknown_country_rolls_back(self, fake_conn):
        fake_conn.execute_results = ["INSERT 0 1", "INSERT 0 1", "UPDATE 0"]

        with pytest.raises(RecordNotFoundError):
            asyncio.run(countries.insert_home_country(**CANADA))

        assert fake_conn.rollbacks == 1


class TestTariffs:

    def test_insert_writes_both_halves(self, fake_conn):
        asyncio.run(
            trade.insert_tariff(
                trade_agreement="Brazil - Canada Agreement",
                tariff_rate=4.5,
                home_name="Brazil",
                foreign_name="Canada",
                enactment_date=date(2025, 3, 1),
                affected_goods="Coffee",
            )
        )

        sql = fake_conn.sql()
        assert sql[0].startswith("INSERT INTO Tariff1")
        assert sql[1].startswith("INSERT INTO Tariff2")
        assert fake_conn.commits == 1

    def test_delete_removes_tariff2_first(self, fake_conn):
        fake_conn.execute_results = ["DELETE 1", "DELETE 1"]

        deleted = asyncio.run(trade.delete_tariff("Canada - China Agreement"))

        sql = fake_conn.sql()
        assert deleted == 1
        assert sql[0].startswith("DELETE FROM Tariff2")
        assert sql[1].startswith("DELETE FROM Tariff1")

    def test_delete_unknown_agreement(self, fake_conn):
        fake_conn.execute_results = ["DELETE 0"]

        with pytest.raises(RecordNotFoundError):
            asyncio.run(trade.delete_tariff("Atlantis - Canada Agreement"))

        assert len(fake_conn.statements) == 1


    def test_update_goods_through_tariff1_key(self, fake_conn):
        updated = asyncio.run(trade.update_tariff(trade_agreement="Canada - China Agreement", affected_goods="Canola"))

        sql, args = fake_conn.statements[0]
        assert updated == 1
        assert sql.startswith("UPDATE Tariff2 t2 SET AffectedGoods = $2 FROM Tariff1 t1")
        assert "t1.TariffRate = t2.TariffRate" in sql
        assert args == ("Canada - China Agreement", "Canola")
        assert fake_conn.commits == 1

    def test_update_unknown_agreement(self, fake_conn):
        fake_conn.execute_results = ["UPDATE 0"]

        with pytest.raises(RecordNotFoundError):
            asyncio.run(trade.update_tariff(trade_agreement="Atlantis - Canada Agreement", affected_goods="Pearls"))

        assert fake_conn.rollbacks == 1


class TestShippingRoutes:

    def test_insert_upserts_pair(self, fake_conn):
        asyncio.run(
            shipping.insert_shipping_route(
                name="Vancouver Express",
                length=1200.0,
                origin_country_name="Japan",
                terminal_country_name="Canada",
                annual_volume_of_goods=None,
            )
        )

        sql = fake_conn.sql()
        assert "ON CONFLICT (OriginCountryName, TerminalCountryName)" in sql[0]
        assert sql[1].startswith("INSERT INTO ShippingRoute2")

    def test_delete_keeps_shared_pair(self, fake_conn):
        fake_conn.fetchrow_results = [{"origin": "Japan", "terminal": "Canada"}]

        asyncio.run(shipping.delete_shipping_route("Great Circle"))

        sql, args = fake_conn.statements[1]
        assert sql.startswith("DELETE FROM ShippingRoute1")
        assert "NOT EXISTS" in sql
        assert args == ("Japan", "Canada")

    def test_delete_unknown_route(self, fake_conn):
        with pytest.raises(RecordNotFoundError):
            asyncio.run(shipping.delete_shipping_route("Northwest Passage"))

        assert fake_conn.rollbacks == 1


    def test_update_length_and_pair_volume(self, fake_conn):
        fake_conn.fetchrow_results = [{"origin": "Japan", "terminal": "Canada"}]

        asyncio.run(shipping.update_shipping_route(name="Great Circle", length=8000.0, annual_volume_of_goods=None))

        route_sql, route_args = fake_conn.statements[0]
        pair_sql, pair_args = fake_conn.statements[1]
        assert route_sql.startswith("UPDATE ShippingRoute2 SET Length = COALESCE($2, Length)")
        assert route_args == ("Great Circle", 8000.0)
        assert pair_sql.startswith("UPDATE ShippingRoute1")
        assert pair_args == ("Japan", "Canada", None)
        assert fake_conn.commits == 1

    def test_update_unknown_route(self, fake_conn):
        with pytest.raises(RecordNotFoundError):
            asyncio.run(shipping.update_shipping_route(name="Northwest Passage", length=1.0, annual_volume_of_goods=1.0))

        assert len(fake_conn.statements) == 1
        assert fake_conn.rollbacks == 1


class TestShips:

    def test_insert_upserts_capacity(self, fake_conn):
        asyncio.run(
            shipping.insert_ship(
                owner="Maersk",
                ship_name="Sea Lion",
                ship_size=100.5,
                capacity=510.0,
                shipping_route_name="Great Circle",
                docked_at_port_address=None,
            )
        )

        sql = fake_conn.sql()
        assert sql[0].startswith("INSERT INTO Ship2")
        assert "ON CONFLICT (ShipSize)" in sql[0]
        assert sql[1].startswith("INSERT INTO Ship1")

    def test_delete_removes_ship2_first(self, fake_conn):
        fake_conn.execute_results = ["DELETE 1", "DELETE 1"]

        assert asyncio.run(shipping.delete_ship(owner="Maersk", ship_name="Ocean Breeze")) == 1
        sql = fake_conn.sql()
        assert sql[0].startswith("DELETE FROM Ship2")
        assert sql[1].startswith("DELETE FROM Ship1")

    def test_delete_without_size_row_fails(self, fake_conn):
        fake_conn.execute_results = ["DELETE 0"]

        with pytest.raises(RecordNotFoundError):
            asyncio.run(shipping.delete_ship(owner="Maersk", ship_name="Dirty Harry"))

        assert len(fake_conn.statements) == 1


    def test_update_with_capacity_upserts_size_row(self, fake_conn):
        asyncio.run(
            shipping.update_ship(
                owner="Maersk",
                ship_name="Ocean Breeze",
                ship_size=140.0,
                capacity=700.0,
                shipping_route_name="Great Circle",
                docked_at_port_address=None,
            )
        )

        sql = fake_conn.sql()
        assert sql[0].startswith("INSERT INTO Ship2")
        assert sql[1].startswith("UPDATE Ship1")
        assert fake_conn.statements[1][1] == ("Maersk", "Ocean Breeze", 140.0, "Great Circle", None)

    def test_update_without_capacity_leaves_ship2(self, fake_conn):
        asyncio.run(
            shipping.update_ship(
                owner="Maersk",
                ship_name="Ocean Breeze",
                ship_size=140.0,
                capacity=None,
                shipping_route_name=None,
                docked_at_port_address="999 Canada Pl, Vancouver, BC V6C 3T4",
            )
        )

        assert [sql.split()[0] for sql in fake_conn.sql()] == ["UPDATE"]

    def test_update_unknown_ship_rolls_back(self, fake_conn):
        fake_conn.execute_results = ["INSERT 0 1", "UPDATE 0"]

        with pytest.raises(RecordNotFoundError):
            asyncio.run(
                shipping.update_ship(
                    owner="Nobody",
                    ship_name="Ghost",
                    ship_size=10.0,
                    capacity=50.0,
                    shipping_route_name=None,
                    docked_at_port_address=None,
                )
            )

        assert fake_conn.rollbacks == 1


class TestShipmentContainers:

    FIELDS = dict(
        tracking_number=2001,
        ship_owner="Maersk",
        ship_name="Dirty Harry",
        port_address="999 Canada Pl, Vancouver, BC V6C 3T4",
        good_type="Lumber",
        good_value=1000.0,
        container_size=40.0,
        weight=300.0,
        trade_agreement=None,
        company_name=None,
        company_ceo=None,
    )

    def test_insert_without_section(self, fake_conn):
        asyncio.run(shipping.insert_shipment_container(section=None, **self.FIELDS))

        sql = fake_conn.sql()
        assert len(sql) == 2
        assert sql[0].startswith("INSERT INTO ShipmentContainer1")
        assert "ON CONFLICT (ShipOwner, ShipName) DO NOTHING" in sql[0]
        assert sql[1].startswith("INSERT INTO ShipmentContainer2")

    def test_insert_into_section_takes_slot(self, fake_conn):
        fake_conn.fetchrow_results = [{"section": 1}, {"num_containers": 90, "capacity": 100}]

        asyncio.run(shipping.insert_shipment_container(section=1, **self.FIELDS))

        assert fake_conn.statements[-1][1] == (self.FIELDS["port_address"], 1, 91)

    def test_insert_into_full_section_rolls_back(self, fake_conn):
        fake_conn.fetchrow_results = [{"section": 1}, {"num_containers": 100, "capacity": 100}]

        with pytest.raises(CapacityError):
            asyncio.run(shipping.insert_shipment_container(section=1, **self.FIELDS))

        assert fake_conn.rollbacks == 1

    def test_second_container_on_ship_adds_cargo_only(self, fake_conn):
        # ON CONFLICT DO NOTHING returns no row when the ship is already placed.
        fake_conn.fetchrow_results = [None]

        asyncio.run(shipping.insert_shipment_container(section=1, **{**self.FIELDS, "tracking_number": 2002}))

        sql = fake_conn.sql()
        assert len(sql) == 2
        assert sql[1].startswith("INSERT INTO ShipmentContainer2")
        assert fake_conn.statements[1][1][6] == 2002
        assert fake_conn.commits == 1

    def test_first_container_without_section_takes_no_slot(self, fake_conn):
        fake_conn.fetchrow_results = [{"section": None}]

        asyncio.run(shipping.insert_shipment_container(section=None, **self.FIELDS))

        assert not any("Warehouse" in sql for sql in fake_conn.sql()[1:])

    def test_update_rewrites_cargo(self, fake_conn):
        cargo = {key: value for key, value in self.FIELDS.items() if key not in ("ship_owner", "ship_name", "port_address")}

        asyncio.run(shipping.update_shipment_container(**{**cargo, "good_value": 5000.0}))

        sql, args = fake_conn.statements[0]
        assert sql.startswith("UPDATE ShipmentContainer2")
        assert sql.endswith("WHERE TrackingNumber = $1")
        assert args[:3] == (2001, "Lumber", 5000.0)
        assert fake_conn.commits == 1

    def test_update_unknown_tracking_number(self, fake_conn):
        fake_conn.execute_results = ["UPDATE 0"]
        cargo = {key: value for key, value in self.FIELDS.items() if key not in ("ship_owner", "ship_name", "port_address")}

        with pytest.raises(RecordNotFoundError):
            asyncio.run(shipping.update_shipment_container(**{**cargo, "tracking_number": 9999}))

        assert fake_conn.rollbacks == 1
