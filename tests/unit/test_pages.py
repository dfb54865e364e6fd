"""Script-level tests for the Crypto and ATM pages using Streamlit's AppTest."""

from unittest.mock import patch

import pytest
from streamlit.testing.v1 import AppTest

from localcoin.errors import CoinFetchError
from localcoin.ui.components.maps import PLACEHOLDER_TEXT
from localcoin.ui.pages.atm import SELECTED_KEY
from localcoin.ui.pages.crypto import NO_RESULTS_MESSAGE

TIMEOUT = 30


def _crypto_script():
    from localcoin.config import Settings
    from localcoin.ui.pages import crypto
    from localcoin.ui.pages.context import PageContext

    crypto.render(PageContext(settings=Settings()))


def _atm_script():
    from localcoin.config import Settings
    from localcoin.ui.pages import atm
    from localcoin.ui.pages.context import PageContext

    atm.render(PageContext(settings=Settings()))


def _captions(at):
    return [caption.value for caption in at.caption]


@pytest.fixture
def crypto_app():
    return AppTest.from_function(_crypto_script, default_timeout=TIMEOUT)


@pytest.fixture
def atm_app():
    return AppTest.from_function(_atm_script, default_timeout=TIMEOUT)


# Crypto page

def test_crypto_page_renders_market_table(crypto_app, coins):
    with patch("localcoin.ui.pages.crypto.load_coins", return_value=coins):
        crypto_app.run()

    assert not crypto_app.exception
    assert len(crypto_app.dataframe) == 1
    assert any(caption.startswith("Showing 5 of 5 coins") for caption in _captions(crypto_app))


def test_crypto_search_without_match_shows_message(crypto_app, coins):
    with patch("localcoin.ui.pages.crypto.load_coins", return_value=coins):
        crypto_app.run()
        crypto_app.text_input(key="crypto_search").input("dogecoin").run()

    assert not crypto_app.exception
    assert [info.value for info in crypto_app.info] == [NO_RESULTS_MESSAGE]
    assert len(crypto_app.dataframe) == 0


def test_crypto_fetch_failure_shows_error_without_table(crypto_app):
    with patch("localcoin.ui.pages.crypto.load_coins", side_effect=CoinFetchError()):
        crypto_app.run()

    assert not crypto_app.exception
    assert [error.value for error in crypto_app.error] == ["Error: Failed to fetch crypto data"]
    assert len(crypto_app.dataframe) == 0


def test_crypto_sort_choice_is_applied(crypto_app, coins):
    with patch("localcoin.ui.pages.crypto.load_coins", return_value=coins):
        crypto_app.run()
        crypto_app.selectbox(key="crypto_sort").select("Price (High to Low)").run()

    query = crypto_app.session_state["crypto_active_query"]
    assert query.sort_field.value == "price"
    assert query.sort_direction.value == "desc"


# ATM page

def test_atm_page_starts_with_placeholder(atm_app):
    atm_app.run()

    assert not atm_app.exception
    assert "8 ATMs found" in _captions(atm_app)
    assert PLACEHOLDER_TEXT in _captions(atm_app)


def test_picked_row_selects_atm(atm_app):
    # Row 1 of the unfiltered table is Montreal
    with patch("localcoin.ui.pages.atm.render_table", return_value=1):
        atm_app.run()

    assert not atm_app.exception
    assert atm_app.session_state[SELECTED_KEY] == 2
    assert "Viewing Montreal ATM" in _captions(atm_app)


def test_selection_survives_online_toggle(atm_app):
    atm_app.session_state[SELECTED_KEY] = 2
    atm_app.run()
    assert "Viewing Montreal ATM" in _captions(atm_app)

    atm_app.toggle(key="atm_online_only").set_value(True).run()

    assert not atm_app.exception
    assert "5 ATMs found" in _captions(atm_app)
    assert atm_app.session_state[SELECTED_KEY] == 2
    assert "Viewing Montreal ATM" in _captions(atm_app)


def test_clear_selection_returns_to_placeholder(atm_app):
    atm_app.session_state[SELECTED_KEY] = 2
    atm_app.run()

    atm_app.button(key="atm_clear").click().run()

    assert not atm_app.exception
    assert SELECTED_KEY not in atm_app.session_state
    assert PLACEHOLDER_TEXT in _captions(atm_app)
    assert "Viewing Montreal ATM" not in _captions(atm_app)
