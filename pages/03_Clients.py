from hayvn_core.ui.page_shell import render_agent_page

render_agent_page(
    "/clients",
    "Clients",
    "Everyone you are working with, from first call to closing.",
)
