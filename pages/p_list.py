from core.crud_views import render_list_screen
from core.helpers import render_layout
from models.patient import PATIENT

render_layout("Patients")
render_list_screen(PATIENT, "pages/p_list.py")
