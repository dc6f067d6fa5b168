from hayvn_core.ui.page_shell import render_agent_page

render_agent_page(
    "/search",
    "Search",
    "Find clients, properties and conversations across your book.",
)
