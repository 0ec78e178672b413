"""
models/project.py
-----------------
Domain models for projects and the records that hang off them.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional


@dataclass
class Material:
    """A material a project needs. Belongs to exactly one project."""
    material_name: str
    project_id: Optional[int] = None
    num_required: Optional[int] = None
    cost: Optional[Decimal] = None
    material_id: Optional[int] = None

    def __str__(self) -> str:
        return f"ID={self.material_id}, name={self.material_name}, required={self.num_required}, cost={self.cost}"


@dataclass
class Step:
    """One step of a project. Ordering is whatever `step_order` says."""
    step_text: str
    step_order: int
    project_id: Optional[int] = None
    step_id: Optional[int] = None

    def __str__(self) -> str:
        return f"ID={self.step_id}, order={self.step_order}, text={self.step_text}"


@dataclass
class Category:
    category_name: str
    category_id: Optional[int] = None

    def __str__(self) -> str:
        return f"ID={self.category_id}, name={self.category_name}"


@dataclass
class Project:
    """
    Represents a tracked project.

    Attributes:
        project_id: Database primary key (None until inserted).
        project_name: Human-readable name.
        estimated_hours: Planned effort.
        actual_hours: Effort spent so far.
        difficulty: Difficulty rating (the store decides what is valid).
        notes: Free-form notes.
        materials: Filled in only by a fetch by id.
        steps: Filled in only by a fetch by id.
        categories: Filled in only by a fetch by id.
    """
    project_name: str
    estimated_hours: Optional[Decimal] = None
    actual_hours: Optional[Decimal] = None
    difficulty: Optional[int] = None
    notes: Optional[str] = None
    project_id: Optional[int] = None
    materials: list[Material] = field(default_factory=list)
    steps: list[Step] = field(default_factory=list)
    categories: list[Category] = field(default_factory=list)

    def __str__(self) -> str:
        lines = [
            f"   ID={self.project_id}",
            f"   name={self.project_name}",
            f"   estimatedHours={self.estimated_hours}",
            f"   actualHours={self.actual_hours}",
            f"   difficulty={self.difficulty}",
            f"   notes={self.notes}",
            "   Materials:",
            *(f"      {m}" for m in self.materials),
            "   Steps:",
            *(f"      {s}" for s in self.steps),
            "   Categories:",
            *(f"      {c}" for c in self.categories),
        ]
        return "\n".join(lines)
