# UI deps imported only when running the app
import os
import logging

from app_state import PokedexController
from cards import CardRenderer, cards_css, fullscreen_html
from config import Settings
from gallery import DismissTarget
from metrics import start_metrics_server

# Streamlit is imported only inside run_app to keep module import-safe
LOG_LEVEL = os.getenv('POKEDEX_LOG_LEVEL', 'INFO').upper()
logging.basicConfig(level=LOG_LEVEL, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
logger = logging.getLogger('pokedex')

GRID_COLUMNS = 4


def build_controller(settings=None):
    """Create the per-session controller and start the metrics exporter if configured."""
    settings = settings or Settings.from_env()
    start_metrics_server(settings.metrics_port)
    logger.info('Starting session api=%s batch_size=%d', settings.api_base, settings.batch_size)
    return PokedexController(settings)


def grid_slots(visible_ids, columns=GRID_COLUMNS):
    """Map each visible card index to its grid column, filling rows left to right."""
    return {index: position % columns for position, index in enumerate(visible_ids)}


def theme_button_label(dark):
    return '☀️ Light mode' if dark else '🌙 Dark mode'


def run_app():
    """Start the Streamlit app UI. Imports Streamlit here to avoid side-effects on import."""
    import streamlit as st

    st.set_page_config(page_title='Pokédex', layout='wide')

    if 'controller' not in st.session_state:
        st.session_state['controller'] = build_controller()
    controller = st.session_state['controller']
    state = controller.state

    def request_load_more():
        # The search box is cleared before loading more
        st.session_state['search_query'] = ''
        st.session_state['pending_load'] = 'more'

    def request_retry():
        st.session_state['pending_load'] = 'retry'

    def run_pending_load(operation):
        live = st.container()
        controller.set_renderer(CardRenderer(
            lambda index, markup: live.markdown(markup, unsafe_allow_html=True)
        ).render)
        try:
            with st.spinner('Loading Pokémon...'):
                operation()
        finally:
            controller.set_renderer(None)
        st.rerun()

    @st.dialog('Pokémon', width='large',
               on_dismiss=lambda: controller.close(DismissTarget.BACKDROP))
    def show_detail():
        view = state.gallery.view
        st.markdown(fullscreen_html(view.index, view.record), unsafe_allow_html=True)
        st.altair_chart(view.chart.draw(), use_container_width=True)
        prev_col, close_col, next_col = st.columns(3)
        if prev_col.button('◀ Previous', use_container_width=True):
            controller.previous(view.index)
            st.rerun()
        if close_col.button('Close', use_container_width=True):
            controller.close(DismissTarget.CLOSE_CONTROL)
            st.rerun()
        if next_col.button('Next ▶', use_container_width=True):
            controller.next(view.index)
            st.rerun()

    with st.sidebar:
        st.button(theme_button_label(state.dark_theme), on_click=controller.toggle_theme)
        width = st.number_input('Viewport width (px)', min_value=240, max_value=3840,
                                value=controller.settings.viewport_width, step=20)
        controller.set_viewport_width(int(width))

    st.markdown(cards_css(state.dark_theme), unsafe_allow_html=True)
    st.title('Pokédex')

    if not len(state.catalogue) and state.last_error is None:
        run_pending_load(controller.start)

    pending = st.session_state.pop('pending_load', None)
    if pending == 'more':
        run_pending_load(controller.load_more)
    elif pending == 'retry':
        run_pending_load(controller.retry)

    if state.last_error is not None:
        st.error(f"Could not load Pokémon: {state.last_error}")
        st.button('Retry', on_click=request_retry)

    query = st.text_input('Search Pokémon', key='search_query',
                          placeholder='Type at least 3 letters')
    result = controller.search(query)
    if result.no_results:
        st.info('No Pokémon found.')

    columns = st.columns(GRID_COLUMNS)
    renderer_slots = grid_slots(result.visible_ids)

    def grid_sink(index, markup):
        with columns[renderer_slots[index]]:
            st.markdown(markup, unsafe_allow_html=True)
            st.button('Details', key=f'open-{index}', on_click=controller.open,
                      args=(index,), use_container_width=True)

    renderer = CardRenderer(grid_sink)
    for index in result.visible_ids:
        renderer.render(index, state.catalogue.get(index))

    st.button('Load more', on_click=request_load_more, disabled=state.loading)

    if state.gallery.is_open:
        show_detail()


if __name__ == '__main__':
    run_app()
