from django.contrib import admin
from .models import Skill


@admin.register(Skill)
class SkillAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "category", "order", "proficiency", "to_study", "updated_at")
    list_editable = ("order", "proficiency", "to_study")
    list_filter = ("category", "to_study")
    search_fields = ("name", "study_notes")
    ordering = ("category", "order", "id")
