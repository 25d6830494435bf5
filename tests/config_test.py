import domain.config as config_module
from domain.config import AppConfig, get_config


def test_get_config_is_loaded_once():
    assert get_config() is get_config()
    assert isinstance(get_config(), AppConfig)


def test_config_module_exposes_no_reload_hook():
    # Defaults are read from the environment when the module is imported
    assert not hasattr(config_module, "reload_config")


def test_withdraw_messages():
    withdraw = get_config().withdraw

    assert withdraw.insufficient_funds_message == "Not enough money on the card"
    assert withdraw.not_found_template.format(user_id=999) == "NO SUCH USER WITH ID 999"
    assert withdraw.landing_path == "/service"
