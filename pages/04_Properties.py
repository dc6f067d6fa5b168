from hayvn_core.ui.page_shell import render_agent_page

render_agent_page(
    "/properties",
    "Properties",
    "Listings and homes your clients are watching.",
)
