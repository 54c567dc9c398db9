from core.crud_views import render_form_screen
from core.helpers import render_layout
from models.patient import PATIENT

# Serves both /patients/add and /patients/edit/:id
render_layout("Patients")
render_form_screen(PATIENT, "pages/p_form.py")
