"""Printable certificates for a patient.

Each certificate type names the extra fields it prints. Missing values are
printed as a blank line to be filled in by hand.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from django.conf import settings
from django.template.loader import render_to_string

from hms_backend.patients.models import Patient

BLANK = '________________'
TEMPLATE_NAME = 'certificates/certificate.html'


class UnknownCertificateType(Exception):
    def __init__(self, code: str):
        self.code = code
        super().__init__(f'Unknown certificate type: {code}.')


@dataclass(frozen=True)
class CertificateField:
    key: str
    label: str


@dataclass(frozen=True)
class CertificateType:
    code: str
    label: str
    fields: tuple[CertificateField, ...]

    def as_dict(self) -> dict:
        return {
            'code': self.code,
            'label': self.label,
            'fields': [{'key': f.key, 'label': f.label} for f in self.fields],
        }


CERTIFICATE_TYPES: dict[str, CertificateType] = {
    ct.code: ct
    for ct in (
        CertificateType('birth', 'Birth Certificate', (
            CertificateField('father_name', "Father's Name"),
        )),
        CertificateType('death', 'Death Certificate', (
            CertificateField('date_of_death', 'Date of Death'),
            CertificateField('cause_of_death', 'Cause of Death'),
        )),
        CertificateType('discharge', 'Discharge Certificate', (
            CertificateField('admission_date', 'Date of Admission'),
            CertificateField('discharge_date', 'Date of Discharge'),
        )),
        CertificateType('police', 'Police Report', (
            CertificateField('incident_date', 'Incident Date'),
            CertificateField('details', 'Details'),
        )),
    )
}


def get_certificate_type(code: str) -> CertificateType:
    try:
        return CERTIFICATE_TYPES[code]
    except KeyError:
        raise UnknownCertificateType(code) from None


def prefill(cert_type: CertificateType, patient: Patient) -> dict:
    """Values known from the patient record (admission/discharge dates)."""
    if cert_type.code != 'discharge':
        return {}
    return {
        'admission_date': patient.admission_date.isoformat() if patient.admission_date else '',
        'discharge_date': patient.discharge_date.isoformat() if patient.discharge_date else '',
    }


def certificate_context(patient: Patient, code: str, values: Optional[Mapping[str, object]] = None) -> dict:
    cert_type = get_certificate_type(code)
    merged = prefill(cert_type, patient)
    for key, value in (values or {}).items():
        if value not in (None, ''):
            merged[key] = value

    lines = []
    for field in cert_type.fields:
        value = str(merged.get(field.key) or '').strip()
        lines.append({'label': field.label, 'value': value or BLANK})

    return {
        'hospital_name': settings.HOSPITAL_NAME,
        'title': cert_type.label,
        'patient_name': patient.full_name,
        'dob': patient.dob,
        'phone': patient.phone_no or 'N/A',
        'lines': lines,
    }


def render_certificate(patient: Patient, code: str, values: Optional[Mapping[str, object]] = None) -> str:
    """Full HTML document for certificate ``code``.

    Raises:
        UnknownCertificateType: ``code`` is not one of CERTIFICATE_TYPES
    """
    return render_to_string(TEMPLATE_NAME, certificate_context(patient, code, values))
