from core.crud_views import render_detail_screen
from core.helpers import render_layout
from models.patient import PATIENT

render_layout("Patients")
render_detail_screen(PATIENT, "pages/p_view.py")
