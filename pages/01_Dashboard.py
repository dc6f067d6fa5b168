from hayvn_core.ui.page_shell import render_agent_page

render_agent_page(
    "/dashboard",
    "Dashboard",
    "Today's clients, tours and offers at a glance.",
)
