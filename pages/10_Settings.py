from hayvn_core.ui.page_shell import render_agent_page

render_agent_page(
    "/settings",
    "Settings",
    "Brokerage, IDX and account preferences.",
)
