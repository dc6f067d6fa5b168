from hayvn_core.ui.page_shell import render_agent_page

render_agent_page(
    "/market-radar",
    "Market Radar",
    "New listings and price moves in your farm areas.",
)
