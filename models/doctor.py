# models/doctor.py

from models.entity import Column, EntityDescriptor, FieldSpec, Section, EMAIL, NUMBER, TEL, TEXTAREA

DOCTOR = EntityDescriptor(
    name="doctor",
    plural="doctors",
    title="Doctor",
    fields=(
        FieldSpec("name", "Name"),
        FieldSpec("specialization", "Specialization"),
        FieldSpec("department", "Department"),
        FieldSpec("yearsOfExperience", "Years of Experience", kind=NUMBER),
        FieldSpec("contactInfo.phone", "Phone", kind=TEL),
        FieldSpec("contactInfo.email", "Email", kind=EMAIL),
        FieldSpec("licenseNumber", "License Number"),
        FieldSpec("officeHours", "Office Hours", placeholder="e.g., 9 AM - 5 PM"),
        FieldSpec("emergencyContact", "Emergency Contact", kind=TEL),
        FieldSpec("education", "Education/Qualifications", kind=TEXTAREA),
    ),
    columns=(
        Column("Name", "name"),
        Column("Specialization", "specialization"),
        Column("Department", "department"),
        Column("Experience", "yearsOfExperience", suffix=" years"),
        Column("Contact", "contactInfo.phone"),
    ),
    sections=(
        Section(
            "Personal Information",
            ("name", "specialization", "department", "yearsOfExperience", "licenseNumber"),
        ),
        Section(
            "Contact Information",
            ("contactInfo.phone", "contactInfo.email", "officeHours", "emergencyContact"),
        ),
        Section("Education & Qualifications", ("education",), wide=True),
    ),
    search_placeholder="Search by name, specialization, or department...",
)
