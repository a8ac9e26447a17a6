import placement_admin.bootstrap_env  # must be first to set env/secrets

from placement_admin.config import LOGIN_PATH, LOGIN_ROUTE, NOT_FOUND_ROUTE, load_settings, resolve_route
from placement_admin.logging_setup import configure_logging
from placement_admin.ui import state
from placement_admin.ui.layout import render_sidebar, setup_page
from placement_admin.ui.pages import (
    applications,
    exam_data,
    internships,
    login,
    not_found,
    overview,
    staff,
)
from placement_admin.ui.pages.context import PageContext


PAGE_RENDERERS = {
    "login": login.render,
    "not_found": not_found.render,
    "overview": overview.render,
    "exam_data": exam_data.render,
    "applications": applications.render,
    "internships": internships.render,
    "staff": staff.render,
}


def main() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)
    setup_page(settings)

    context = PageContext(
        settings=settings,
        notifier=state.get_notifier(settings),
        collections=state.get_collections(),
        navigate=state.navigate,
    )

    route = resolve_route(state.current_path())
    if route.requires_login and not state.is_authenticated():
        state.navigate(LOGIN_PATH)
        route = LOGIN_ROUTE

    if route not in (LOGIN_ROUTE, NOT_FOUND_ROUTE):
        render_sidebar(context, route)

    PAGE_RENDERERS[route.key](context)
    context.notifier.render()


if __name__ == "__main__":
    main()
