"""
Table definitions and fixed seed rows for every entity.

Each `TableSpec` groups the physical tables behind one logical entity
(split entities such as Tariff1/Tariff2 share one spec), the DDL that
recreates them, and the literal rows loaded on reset.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any

NO_PORT_SENTINEL = "No ports from this country are currently monitored."


@dataclass(frozen=True)
class SeedSet:
    insert_sql: str
    rows: tuple[tuple[Any, ...], ...]


@dataclass(frozen=True)
class TableSpec:
    entity: str
    # Lower-case physical names, in creation order.
    tables: tuple[str, ...]
    ddl: tuple[str, ...]
    seeds: tuple[SeedSet, ...] = field(default_factory=tuple)

    @property
    def seed_row_count(self) -> int:
        return sum(len(s.rows) for s in self.seeds)


_CANADA_PORT = "999 Canada Pl, Vancouver, BC V6C 3T4"
_USA_PORT = "Signal St, San Pedro, CA 90731, United States"
_CHINA_PORT = "Shengsi County, Zhoushan, China, 202461"
_JAPAN_PORT = "4 - chōme - 8 Ariake, Koto City, Tokyo 135-0063, Japan"
_NETHERLANDS_PORT = "Wilhelminakade 909, 3072 AP Rotterdam, Netherlands"
_RUSSIA_PORT = "2, Mira St, Novorossiysk, Krasnodar Region 353900, Russia"
_INDIA_PORT = "Port House Shoorji Vallabhdas Marg Mumbai, Maharastra 400 001, India"
_BRAZIL_PORT = "Av. Conselheiro Rodrigues Alves, S/N - Porto Macuco, Santos - SP, 11015-900, Brazil"
_UK_PORT = "Immingham DN40 2LZ, United Kingdom"


COUNTRY = TableSpec(
    entity="country",
    tables=("country",),
    ddl=(
        """
        CREATE TABLE Country (
            Name        VARCHAR(100) NOT NULL,
            Population  BIGINT,
            Government  VARCHAR(100) UNIQUE,
            GDP         DOUBLE PRECISION NOT NULL,
            PortAddress VARCHAR(200) NOT NULL,
            PRIMARY KEY (Name)
        )
        """,
    ),
    seeds=(
        SeedSet(
            insert_sql="""
                INSERT INTO Country (Name, Population, Government, GDP, PortAddress)
                VALUES ($1, $2, $3, $4, $5)
            """,
            rows=(
                ("Canada", 38930000, "Liberal Party - Justin Trudeau", 2.14, _CANADA_PORT),
                ("USA", 333300000, "Democratic Party - Joe Biden", 27.36, _USA_PORT),
                ("China", 1412000000, "Chinese Communist Party - Xi Jinping", 17.79, _CHINA_PORT),
                ("Japan", 125100000, "Liberal Democratic Party - Shigeru Ishiba", 5.21, _JAPAN_PORT),
                ("Netherlands", 177000000, "Independent - Dick Schoof", 10.12, _NETHERLANDS_PORT),
                ("Russia", 146000000, "United Russia - Vladimir Putin", 11.68, _RUSSIA_PORT),
                ("India", 1390000000, "Bharatiya Janata Party - Narendra Modi", 3.55, _INDIA_PORT),
                ("Brazil", 213000000, "Workers Party - Luiz Inácio Lula da Silva", 7.51, _BRAZIL_PORT),
                ("UK", 67000000, "Conservative Party - Rishi Sunak", 3.03, _UK_PORT),
            ),
        ),
    ),
)

PORT = TableSpec(
    entity="port",
    tables=("port",),
    ddl=(
        """
        CREATE TABLE Port (
            PortAddress VARCHAR(200) NOT NULL,
            NumWorkers  INTEGER,
            DockedShips INTEGER,
            CountryName VARCHAR(100),
            PRIMARY KEY (PortAddress),
            FOREIGN KEY (CountryName) REFERENCES Country (Name) ON DELETE CASCADE
        )
        """,
    ),
    seeds=(
        SeedSet(
            insert_sql="""
                INSERT INTO Port (PortAddress, NumWorkers, DockedShips, CountryName)
                VALUES ($1, $2, $3, $4)
            """,
            rows=(
                (_CANADA_PORT, 523, 53, "Canada"),
                (_CHINA_PORT, 13546, 123, "China"),
                (_NETHERLANDS_PORT, 1270, 225, "Netherlands"),
                (_USA_PORT, 1230, 67, "USA"),
                (_JAPAN_PORT, 30000, 44, "Japan"),
            ),
        ),
    ),
)

WAREHOUSE = TableSpec(
    entity="warehouse",
    tables=("warehouse",),
    ddl=(
        """
        CREATE TABLE Warehouse (
            PortAddress      VARCHAR(200) NOT NULL,
            WarehouseSection INTEGER NOT NULL,
            NumContainers    INTEGER NOT NULL DEFAULT 0,
            Capacity         INTEGER NOT NULL,
            PRIMARY KEY (PortAddress, WarehouseSection),
            FOREIGN KEY (PortAddress) REFERENCES Port (PortAddress) ON DELETE CASCADE,
            CHECK (NumContainers >= 0 AND NumContainers <= Capacity)
        )
        """,
    ),
    seeds=(
        SeedSet(
            insert_sql="""
                INSERT INTO Warehouse (WarehouseSection, NumContainers, Capacity, PortAddress)
                VALUES ($1, $2, $3, $4)
            """,
            rows=(
                (1, 90, 100, _CANADA_PORT),
                (2, 200, 300, _CHINA_PORT),
                (3, 200, 200, _NETHERLANDS_PORT),
                (4, 631, 1000, _USA_PORT),
                (9, 10, 220, _JAPAN_PORT),
            ),
        ),
    ),
)

HOME_COUNTRY = TableSpec(
    entity="homecountry",
    tables=("homecountry",),
    ddl=(
        """
        CREATE TABLE HomeCountry (
            Name        VARCHAR(100) NOT NULL,
            Population  BIGINT,
            GDP         DOUBLE PRECISION,
            Government  VARCHAR(100),
            PortAddress VARCHAR(200),
            PRIMARY KEY (Name),
            FOREIGN KEY (Name) REFERENCES Country (Name) ON DELETE CASCADE
        )
        """,
    ),
    seeds=(
        SeedSet(
            insert_sql="""
                INSERT INTO HomeCountry (Name, Population, GDP, Government, PortAddress)
                VALUES ($1, $2, $3, $4, $5)
            """,
            rows=(
                ("Canada", 38000000, 2.14, "Liberal Party - Justin Trudeau", _CANADA_PORT),
                ("USA", 331000000, 27.36, "Democratic Party - Joe Biden", _USA_PORT),
                ("China", 83000000, 17.79, "Chinese Communist Party - Xi Jinping", _CHINA_PORT),
                ("Japan", 125800000, 4.21, "Liberal Democratic Party - Shigeru Ishiba", _JAPAN_PORT),
                ("Netherlands", 25600000, 1.12, "Independent - Dick Schoof", _NETHERLANDS_PORT),
                ("Russia", 146000000, 1680.0, "United Russia - Vladimir Putin", _RUSSIA_PORT),
                ("India", 1390000000, 2875.0, "Bharatiya Janata Party - Narendra Modi", _INDIA_PORT),
                ("Brazil", 213000000, 1505.0, "Workers Party - Luiz Inácio Lula da Silva", _BRAZIL_PORT),
            ),
        ),
    ),
)

FOREIGN_COUNTRY = TableSpec(
    entity="foreigncountry",
    tables=("foreigncountry",),
    ddl=(
        """
        CREATE TABLE ForeignCountry (
            Name        VARCHAR(100) NOT NULL,
            Population  BIGINT,
            GDP         DOUBLE PRECISION,
            Government  VARCHAR(100),
            DockingFee  DOUBLE PRECISION,
            PortAddress VARCHAR(200),
            PRIMARY KEY (Name),
            FOREIGN KEY (Name) REFERENCES Country (Name) ON DELETE CASCADE
        )
        """,
    ),
    seeds=(
        SeedSet(
            insert_sql="""
                INSERT INTO ForeignCountry (Name, Population, GDP, Government, DockingFee, PortAddress)
                VALUES ($1, $2, $3, $4, $5, $6)
            """,
            rows=(
                ("Canada", 38000000, 2.14, "Liberal Party - Justin Trudeau", 500.0, _CANADA_PORT),
                ("Russia", 146000000, 1680.0, "United Russia - Vladimir Putin", 620.0, _RUSSIA_PORT),
                ("India", 1390000000, 2875.0, "Bharatiya Janata Party - Narendra Modi", 580.0, _INDIA_PORT),
                ("Brazil", 213000000, 1505.0, "Workers Party - Luiz Inácio Lula da Silva", 490.0, _BRAZIL_PORT),
                ("USA", 331000000, 27.36, "Democratic Party - Joe Biden", 600.0, _USA_PORT),
                ("China", 83000000, 17.79, "Chinese Communist Party - Xi Jinping", 550.0, _CHINA_PORT),
                ("Japan", 125800000, 4.21, "Liberal Democratic Party - Shigeru Ishiba", 580.0, _JAPAN_PORT),
                ("Netherlands", 25600000, 1.12, "Independent - Dick Schoof", 470.0, _NETHERLANDS_PORT),
            ),
        ),
    ),
)


def _tariff_rows() -> tuple[tuple[tuple[Any, ...], ...], tuple[tuple[Any, ...], ...]]:
    # (home, foreign, rate, goods, enacted)
    pairs: list[tuple[str, str, float, str, date]] = [("China", "USA", 12, "Solar Panels", date(2024, 1, 15))]
    for home in ("Canada", "USA", "Japan"):
        pairs.extend(
            [
                (home, "China", 9, "Lumber", date(2024, 10, 25)),
                (home, "Netherlands", 8, "Maple Syrup", date(2020, 6, 12)),
                (home, "USA", 5, "Oil", date(2020, 1, 30)),
                (home, "Japan", 6, "Wheat", date(1998, 4, 9)),
                (home, "Russia", 6, "Wheat", date(1998, 4, 9)),
                (home, "India", 6, "Wheat", date(1998, 4, 9)),
                (home, "Brazil", 6, "Wheat", date(1998, 4, 9)),
                (home, "Canada", 6, "Wheat", date(1998, 4, 9)),
            ]
        )
    tariff1 = tuple(
        (f"{home} - {foreign} Agreement", rate, home, foreign, enacted)
        for (home, foreign, rate, _goods, enacted) in pairs
    )
    tariff2 = tuple(
        (rate, goods, home, foreign, enacted)
        for (home, foreign, rate, goods, enacted) in pairs
    )
    return tariff1, tariff2


_TARIFF1_ROWS, _TARIFF2_ROWS = _tariff_rows()

TARIFF = TableSpec(
    entity="tariff",
    tables=("tariff1", "tariff2"),
    ddl=(
        """
        CREATE TABLE Tariff1 (
            TradeAgreement VARCHAR(100) NOT NULL,
            TariffRate     DOUBLE PRECISION,
            HomeName       VARCHAR(100),
            ForeignName    VARCHAR(100),
            EnactmentDate  DATE,
            PRIMARY KEY (TradeAgreement),
            FOREIGN KEY (ForeignName) REFERENCES ForeignCountry (Name) ON DELETE CASCADE,
            FOREIGN KEY (HomeName) REFERENCES HomeCountry (Name) ON DELETE CASCADE
        )
        """,
        """
        CREATE TABLE Tariff2 (
            TariffRate    DOUBLE PRECISION NOT NULL,
            AffectedGoods VARCHAR(100),
            HomeName      VARCHAR(100) NOT NULL,
            ForeignName   VARCHAR(100) NOT NULL,
            EnactmentDate DATE NOT NULL,
            PRIMARY KEY (EnactmentDate, TariffRate, HomeName, ForeignName),
            FOREIGN KEY (ForeignName) REFERENCES ForeignCountry (Name) ON DELETE CASCADE,
            FOREIGN KEY (HomeName) REFERENCES HomeCountry (Name) ON DELETE CASCADE
        )
        """,
    ),
    seeds=(
        SeedSet(
            insert_sql="""
                INSERT INTO Tariff1 (TradeAgreement, TariffRate, HomeName, ForeignName, EnactmentDate)
                VALUES ($1, $2, $3, $4, $5)
            """,
            rows=_TARIFF1_ROWS,
        ),
        SeedSet(
            insert_sql="""
                INSERT INTO Tariff2 (TariffRate, AffectedGoods, HomeName, ForeignName, EnactmentDate)
                VALUES ($1, $2, $3, $4, $5)
            """,
            rows=_TARIFF2_ROWS,
        ),
    ),
)

SHIPPING_ROUTE = TableSpec(
    entity="shippingroute",
    tables=("shippingroute1", "shippingroute2"),
    ddl=(
        """
        CREATE TABLE ShippingRoute1 (
            AnnualVolumeOfGoods DOUBLE PRECISION,
            OriginCountryName   VARCHAR(100) NOT NULL,
            TerminalCountryName VARCHAR(100) NOT NULL,
            PRIMARY KEY (OriginCountryName, TerminalCountryName),
            FOREIGN KEY (OriginCountryName) REFERENCES ForeignCountry (Name) ON DELETE CASCADE,
            FOREIGN KEY (TerminalCountryName) REFERENCES Country (Name) ON DELETE CASCADE
        )
        """,
        """
        CREATE TABLE ShippingRoute2 (
            Name                VARCHAR(100) NOT NULL,
            Length              DOUBLE PRECISION,
            OriginCountryName   VARCHAR(100) NOT NULL,
            TerminalCountryName VARCHAR(100) NOT NULL,
            PRIMARY KEY (Name),
            FOREIGN KEY (OriginCountryName) REFERENCES ForeignCountry (Name) ON DELETE CASCADE,
            FOREIGN KEY (TerminalCountryName) REFERENCES Country (Name) ON DELETE CASCADE
        )
        """,
    ),
    seeds=(
        SeedSet(
            insert_sql="""
                INSERT INTO ShippingRoute1 (AnnualVolumeOfGoods, OriginCountryName, TerminalCountryName)
                VALUES ($1, $2, $3)
            """,
            rows=(
                (12000, "Canada", "USA"),
                (45000, "USA", "Canada"),
                (80000, "China", "Canada"),
                (20000, "Netherlands", "Canada"),
                (60000, "Japan", "Canada"),
            ),
        ),
        SeedSet(
            insert_sql="""
                INSERT INTO ShippingRoute2 (Name, Length, OriginCountryName, TerminalCountryName)
                VALUES ($1, $2, $3, $4)
            """,
            rows=(
                ("Great Circle", 4078, "Japan", "Canada"),
                ("PANZ Seattle Loop", 1319, "USA", "Canada"),
                ("Trans - Pacific Route", 7838, "China", "Canada"),
                ("Rotterdam - Vancouver", 11564, "Netherlands", "Canada"),
                ("Toronto - Florida", 2343, "Canada", "USA"),
            ),
        ),
    ),
)

SHIP = TableSpec(
    entity="ship",
    tables=("ship1", "ship2"),
    ddl=(
        """
        CREATE TABLE Ship1 (
            Owner               VARCHAR(100) NOT NULL,
            ShipName            VARCHAR(100) NOT NULL,
            ShipSize            DOUBLE PRECISION,
            ShippingRouteName   VARCHAR(100),
            DockedAtPortAddress VARCHAR(200),
            PRIMARY KEY (Owner, ShipName),
            FOREIGN KEY (ShippingRouteName) REFERENCES ShippingRoute2 (Name) ON DELETE CASCADE,
            FOREIGN KEY (DockedAtPortAddress) REFERENCES Port (PortAddress) ON DELETE CASCADE
        )
        """,
        """
        CREATE TABLE Ship2 (
            ShipSize DOUBLE PRECISION NOT NULL,
            Capacity DOUBLE PRECISION,
            PRIMARY KEY (ShipSize)
        )
        """,
    ),
    seeds=(
        SeedSet(
            insert_sql="""
                INSERT INTO Ship1 (Owner, ShipName, ShippingRouteName, DockedAtPortAddress, ShipSize)
                VALUES ($1, $2, $3, $4, $5)
            """,
            rows=(
                ("Maersk", "Ocean Breeze", "Great Circle", _CANADA_PORT, 100.5),
                ("Maersk", "Dirty Harry", "Great Circle", _CANADA_PORT, 113.6),
                ("Atlantic Trade", "Challenger", "Rotterdam - Vancouver", _CANADA_PORT, 85.5),
                ("Atlantic Trade", "Killer", "Great Circle", _CHINA_PORT, 11.23),
                ("Mediterranean Shipping Company", "Seawolf", "PANZ Seattle Loop", _CHINA_PORT, 150.75),
                ("Atlantic Trade", "Blue Horizon", "Trans - Pacific Route", _NETHERLANDS_PORT, 200.0),
                ("Pacific Vessels", "Tidal Wave", "Rotterdam - Vancouver", _USA_PORT, 175.4),
                ("Maritime Enterprises", "Northern Star", "PANZ Seattle Loop", _JAPAN_PORT, 225.6),
            ),
        ),
        SeedSet(
            insert_sql="INSERT INTO Ship2 (ShipSize, Capacity) VALUES ($1, $2)",
            rows=(
                (100.5, 500.0),
                (150.75, 800.0),
                (200.0, 1200.0),
                (175.4, 950.0),
                (225.6, 1400.0),
            ),
        ),
    ),
)

COMPANY = TableSpec(
    entity="company",
    tables=("company",),
    ddl=(
        """
        CREATE TABLE Company (
            CEO           VARCHAR(100) NOT NULL,
            Name          VARCHAR(100) NOT NULL,
            Industry      VARCHAR(100),
            YearlyRevenue DOUBLE PRECISION,
            CountryName   VARCHAR(100) NOT NULL,
            PRIMARY KEY (CEO, Name),
            FOREIGN KEY (CountryName) REFERENCES Country (Name) ON DELETE CASCADE
        )
        """,
    ),
    seeds=(
        SeedSet(
            insert_sql="""
                INSERT INTO Company (CEO, Name, Industry, YearlyRevenue, CountryName)
                VALUES ($1, $2, $3, $4, $5)
            """,
            rows=(
                ("Wang Chuanfu", "BYD Auto", "Automotive", 112000.0, "USA"),
                ("Elliot Hill", "Nike", "Sportswear", 37200.0, "USA"),
                ("Kevin Plank", "UnderArmour", "Sportswear", 5000.0, "USA"),
                ("Christophe Fouquet", "ASML Holdings", "Technology", 29800.0, "Netherlands"),
                ("Shuntaro Furakawa", "Nintendo", "Entertainment", 14000.0, "Japan"),
                ("Mark Bristow", "Berrick Gold", "Mining", 11400.0, "Canada"),
            ),
        ),
    ),
)

SHIPMENT_CONTAINER = TableSpec(
    entity="shipmentcontainer",
    tables=("shipmentcontainer1", "shipmentcontainer2"),
    ddl=(
        """
        CREATE TABLE ShipmentContainer1 (
            ShipOwner        VARCHAR(100) NOT NULL,
            ShipName         VARCHAR(100) NOT NULL,
            PortAddress      VARCHAR(200) NOT NULL,
            WarehouseSection INTEGER,
            PRIMARY KEY (ShipOwner, ShipName),
            FOREIGN KEY (ShipOwner, ShipName) REFERENCES Ship1 (Owner, ShipName) ON DELETE CASCADE,
            FOREIGN KEY (PortAddress) REFERENCES Port (PortAddress) ON DELETE CASCADE,
            FOREIGN KEY (PortAddress, WarehouseSection)
                REFERENCES Warehouse (PortAddress, WarehouseSection) ON DELETE CASCADE
        )
        """,
        """
        CREATE TABLE ShipmentContainer2 (
            ShipOwner      VARCHAR(100),
            ShipName       VARCHAR(100),
            GoodType       VARCHAR(100),
            GoodValue      DOUBLE PRECISION,
            ContainerSize  DOUBLE PRECISION,
            Weight         DOUBLE PRECISION,
            TrackingNumber INTEGER NOT NULL,
            TradeAgreement VARCHAR(100),
            CompanyName    VARCHAR(100),
            CompanyCEO     VARCHAR(100),
            PRIMARY KEY (TrackingNumber),
            FOREIGN KEY (ShipOwner, ShipName) REFERENCES Ship1 (Owner, ShipName) ON DELETE CASCADE,
            FOREIGN KEY (TradeAgreement) REFERENCES Tariff1 (TradeAgreement) ON DELETE CASCADE,
            FOREIGN KEY (CompanyCEO, CompanyName) REFERENCES Company (CEO, Name) ON DELETE CASCADE
        )
        """,
    ),
    seeds=(
        SeedSet(
            insert_sql="""
                INSERT INTO ShipmentContainer1 (ShipOwner, ShipName, PortAddress, WarehouseSection)
                VALUES ($1, $2, $3, $4)
            """,
            rows=(
                ("Maersk", "Ocean Breeze", _CANADA_PORT, 1),
                ("Mediterranean Shipping Company", "Seawolf", _CHINA_PORT, 2),
                ("Atlantic Trade", "Blue Horizon", _NETHERLANDS_PORT, 3),
                ("Pacific Vessels", "Tidal Wave", _USA_PORT, 4),
                ("Maritime Enterprises", "Northern Star", _JAPAN_PORT, 9),
            ),
        ),
        SeedSet(
            insert_sql="""
                INSERT INTO ShipmentContainer2 (
                    ShipOwner, ShipName, GoodType, GoodValue, ContainerSize, Weight,
                    TrackingNumber, TradeAgreement, CompanyName, CompanyCEO
                )
                VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10)
            """,
            rows=(
                ("Maersk", "Ocean Breeze", "Automotive", 2000000, 45.0, 300.0, 1001,
                 "China - USA Agreement", "BYD Auto", "Wang Chuanfu"),
                ("Mediterranean Shipping Company", "Seawolf", "Mining", 1300000, 50.0, 450.0, 1002,
                 "Canada - China Agreement", "Berrick Gold", "Mark Bristow"),
                ("Atlantic Trade", "Blue Horizon", "Sportswear", 600000, 30.0, 200.0, 1003,
                 "Canada - Netherlands Agreement", "Nike", "Elliot Hill"),
                ("Pacific Vessels", "Tidal Wave", "Sportswear", 400000, 60.0, 500.0, 1004,
                 "Canada - USA Agreement", "UnderArmour", "Kevin Plank"),
                ("Maritime Enterprises", "Northern Star", "Entertainment", 700000, 55.0, 400.0, 1005,
                 "Canada - Japan Agreement", "Nintendo", "Shuntaro Furakawa"),
            ),
        ),
    ),
)

# Parents before children; reset-all walks this order.
RESET_ORDER: tuple[TableSpec, ...] = (
    COUNTRY,
    PORT,
    WAREHOUSE,
    HOME_COUNTRY,
    FOREIGN_COUNTRY,
    TARIFF,
    SHIPPING_ROUTE,
    SHIP,
    COMPANY,
    SHIPMENT_CONTAINER,
)

SPECS_BY_ENTITY: dict[str, TableSpec] = {spec.entity: spec for spec in RESET_ORDER}


def spec_for(entity: str) -> TableSpec:
    try:
        return SPECS_BY_ENTITY[entity]
    except KeyError:
        raise KeyError(f"Unknown entity {entity!r}. Known: {sorted(SPECS_BY_ENTITY)}") from None
