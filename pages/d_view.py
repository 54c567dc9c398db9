from core.crud_views import render_detail_screen
from core.helpers import render_layout
from models.doctor import DOCTOR

render_layout("Doctors")
render_detail_screen(DOCTOR, "pages/d_view.py")
