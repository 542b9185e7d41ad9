import pytest
from django.conf import settings

pytestmark = pytest.mark.unit


@pytest.mark.skipif(
    settings.DATABASES["default"]["ENGINE"] != "django.db.backends.sqlite3",
    reason="SQLite-only options",
)
class TestSqliteTransactions:
    def test_transactions_take_the_write_lock_at_begin(self):
        options = settings.DATABASES["default"]["OPTIONS"]
        assert options["transaction_mode"] == "IMMEDIATE"

    def test_writers_wait_for_the_lock(self):
        assert settings.DATABASES["default"]["OPTIONS"]["timeout"] >= 1

    def test_test_database_is_file_backed(self):
        assert settings.DATABASES["default"]["TEST"]["NAME"].endswith(".sqlite3")
