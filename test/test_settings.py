from config.settings import Config, TestConfig, engine_options


def test_busy_timeout_only_for_sqlite():
    assert "timeout" in engine_options("sqlite:///fixpoint.db")["connect_args"]
    assert engine_options("mysql+pymysql://u:p@db/fixpoint") == {}


def test_test_config_has_its_own_engine_options():
    assert TestConfig.SQLALCHEMY_ENGINE_OPTIONS is not Config.SQLALCHEMY_ENGINE_OPTIONS
