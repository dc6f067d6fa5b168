from hayvn_core.ui.page_shell import render_agent_page

render_agent_page(
    "/analytics",
    "Analytics",
    "How your business is trending.",
)
