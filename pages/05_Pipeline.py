from hayvn_core.ui.page_shell import render_agent_page

render_agent_page(
    "/pipeline",
    "Pipeline",
    "Where every deal stands, stage by stage.",
)
