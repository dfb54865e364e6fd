import localcoin.bootstrap_env  # must be first to set env/secrets
import streamlit as st

from localcoin.config import TABS, get_settings
from localcoin.logging_setup import configure_logging
from localcoin.ui.layout import setup_page, sidebar_ui
from localcoin.ui.pages import atm, crypto, home
from localcoin.ui.pages.context import PageContext


PAGE_RENDERERS = {
    "home": home.render,
    "crypto": crypto.render,
    "atm": atm.render,
}


def main() -> None:
    setup_page()
    settings = get_settings()
    configure_logging(settings.log_level)

    st.title("Localcoin")
    sidebar_ui(settings)

    context = PageContext(settings=settings)

    tab_labels = [tab.label for tab in TABS]
    streamlit_tabs = st.tabs(tab_labels)

    for streamlit_tab, tab_config in zip(streamlit_tabs, TABS):
        renderer = PAGE_RENDERERS.get(tab_config.key)
        if renderer is None:
            continue
        with streamlit_tab:
            renderer(context)


if __name__ == "__main__":
    main()
