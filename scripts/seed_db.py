from __future__ import annotations

import importlib

from config import get_settings_module

from warehouse_attendance.database.bootstrap import SEED_PATH, apply_seed_sql
from warehouse_attendance.database.connection import DBConfig


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_seed_sql(db_config, seed_path=SEED_PATH)
    print(f"OK: Seeded demo employees -> {DBConfig.from_dict(db_config).describe()}")


if __name__ == "__main__":
    main()
