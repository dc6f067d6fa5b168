from hayvn_core.ui.page_shell import render_agent_page

render_agent_page(
    "/offers",
    "Offers",
    "Offers drafted, submitted and countered.",
)
