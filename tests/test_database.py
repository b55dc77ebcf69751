from storefront.database import resolve_database_url


def test_sqlite_url_is_left_alone():
    assert resolve_database_url("sqlite:///./storefront.db") == "sqlite:///./storefront.db"


def test_db_name_replaces_database():
    url = resolve_database_url("sqlite:///./storefront.db", "other.db")

    assert url == "sqlite:///other.db"


def test_postgres_gets_sslmode():
    url = resolve_database_url("postgresql://u:p@db.example.com:5432/shop", "nine_cards")

    assert url == "postgresql://u:p@db.example.com:5432/nine_cards?sslmode=require"


def test_postgres_sslmode_is_not_overridden():
    url = resolve_database_url("postgresql://u:p@db.example.com/shop?sslmode=disable")

    assert url.endswith("sslmode=disable")
    assert "require" not in url
