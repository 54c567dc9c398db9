from core.crud_views import render_form_screen
from core.helpers import render_layout
from models.doctor import DOCTOR

# Serves both /doctors/add and /doctors/edit/:id
render_layout("Doctors")
render_form_screen(DOCTOR, "pages/d_form.py")
