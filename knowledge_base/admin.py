"""
knowledge_base/admin.py
=======================
Django admin configuration for the disease catalog.

Customized DiseaseModelAdmin with:
    - Prevalence rendered as a mini bar in the list view.
    - Prevalence edited through a range slider in the form.
"""

from django import forms
from django.contrib import admin
from django.utils.html import format_html

from .models import DiseaseModel


# ─────────────────────────────────────────────────────────────────────
# Disease Admin: custom form with slider
# ─────────────────────────────────────────────────────────────────────


class DiseaseAdminForm(forms.ModelForm):
    """Custom form for :class:`DiseaseModel` in the admin.

    Renders ``prevalence`` as an HTML range slider with a live numeric
    readout beside it.
    """

    prevalence = forms.DecimalField(
        min_value=0,
        max_value=1,
        decimal_places=4,
        widget=forms.NumberInput(
            attrs={
                "type": "range",
                "min": "0",
                "max": "1",
                "step": "0.0001",
                "class": "form-range",
                "style": "width: 300px; vertical-align: middle;",
                "oninput": "document.getElementById('prev-value').textContent = this.value;",
            }
        ),
        help_text="Prevalence estimate (0.0 to 1.0). Drag the slider to adjust.",
    )

    class Meta:
        model = DiseaseModel
        fields = "__all__"


@admin.register(DiseaseModel)
class DiseaseModelAdmin(admin.ModelAdmin):
    """Admin view for :class:`DiseaseModel`."""

    form = DiseaseAdminForm

    list_display: list[str] = [
        "name",
        "icd_code",
        "severity_level",
        "is_common",
        "prevalence_bar",
    ]
    list_filter: list[str] = ["severity_level", "is_common"]
    search_fields: list[str] = ["name", "icd_code", "description"]
    list_per_page: int = 25

    fieldsets = (
        (
            "Classification",
            {
                "fields": ("name", "icd_code", "severity_level", "is_common"),
            },
        ),
        (
            "Prevalence",
            {
                "fields": ("prevalence",),
                "description": (
                    'Drag the slider to set the prevalence estimate. '
                    '<span id="prev-value" style="font-weight: bold; font-size: 1.1em; '
                    'color: #4f46e5;"></span>'
                ),
            },
        ),
        (
            "Clinical Information",
            {
                "fields": ("description", "treatment_info", "prevention_info"),
            },
        ),
    )

    @admin.display(description="Prevalence", ordering="prevalence")
    def prevalence_bar(self, obj: DiseaseModel) -> str:
        """Render a mini progress bar for the prevalence estimate."""
        pct = round(float(obj.prevalence) * 100, 1)
        if pct >= 15:
            colour = "#10b981"
        elif pct >= 5:
            colour = "#f59e0b"
        else:
            colour = "#94a3b8"
        return format_html(
            '<div style="display:flex; align-items:center; gap:8px;">'
            '<div style="width:80px; height:8px; background:#e2e8f0; '
            'border-radius:4px; overflow:hidden;">'
            '<div style="width:{}%; height:100%; background:{}; '
            'border-radius:4px;"></div></div>'
            '<span style="font-weight:600; font-size:0.85em;">{}%</span></div>',
            min(pct, 100),
            colour,
            pct,
        )
