from hayvn_core.ui.sign_in_page import render_sign_in_page

render_sign_in_page()
