from core.crud_views import render_list_screen
from core.helpers import render_layout
from models.doctor import DOCTOR

render_layout("Doctors")
render_list_screen(DOCTOR, "pages/d_list.py")
