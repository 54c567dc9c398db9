# models/patient.py

from models.entity import (
    Column, EntityDescriptor, FieldSpec, Section,
    DATE, EMAIL, NUMBER, SELECT, TEL, TEXTAREA,
)

GENDERS = ("Male", "Female", "Other")
BLOOD_TYPES = ("A+", "A-", "B+", "B-", "AB+", "AB-", "O+", "O-")

PATIENT = EntityDescriptor(
    name="patient",
    plural="patients",
    title="Patient",
    fields=(
        # Demographics
        FieldSpec("name", "Name"),
        FieldSpec("age", "Age", kind=NUMBER),
        FieldSpec("gender", "Gender", kind=SELECT, options=GENDERS, placeholder="Select Gender"),

        # Contact
        FieldSpec("contactInfo.phone", "Phone", kind=TEL),
        FieldSpec("contactInfo.email", "Email", kind=EMAIL),
        FieldSpec("address", "Address"),
        FieldSpec("bloodType", "Blood Type", kind=SELECT, options=BLOOD_TYPES, placeholder="Select Blood Type"),
        FieldSpec("emergencyContact", "Emergency Contact", kind=TEL),

        # Insurance is optional as a whole
        FieldSpec("insuranceDetails.provider", "Insurance Provider", required=False, fallback="N/A"),
        FieldSpec("insuranceDetails.policyNumber", "Policy Number", required=False, fallback="N/A"),
        FieldSpec("insuranceDetails.expiryDate", "Policy Expiry Date", kind=DATE, required=False, fallback="N/A"),

        FieldSpec(
            "medicalHistory", "Medical History", kind=TEXTAREA, required=False,
            fallback="No medical history recorded",
        ),
    ),
    columns=(
        Column("Name", "name"),
        Column("Age", "age"),
        Column("Gender", "gender"),
        Column("Contact", "contactInfo.phone"),
        Column("Blood Type", "bloodType"),
    ),
    sections=(
        Section("Personal Information", ("name", "age", "gender", "bloodType", "address")),
        Section("Contact Information", ("contactInfo.phone", "contactInfo.email", "emergencyContact")),
        Section("Medical Information", ("medicalHistory",), wide=True),
        Section(
            "Insurance Information",
            ("insuranceDetails.provider", "insuranceDetails.policyNumber", "insuranceDetails.expiryDate"),
            wide=True,
        ),
    ),
    search_placeholder="Search by name or ID...",
)
