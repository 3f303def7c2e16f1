"""
Deterministic fallback results.

Served whenever a provider is skipped, fails, or returns output that does
not satisfy the task's shape contract. Pure functions: no I/O, no clock,
no randomness. Only simple fields (name, email, current headline) are
echoed from the request, together with the region's phone and location
formats. Every result carries the task's required keys.
"""

from typing import Any, Callable, Dict

from .tasks import GenerationRequest, TaskType


def fallback_resume(request: GenerationRequest) -> Dict[str, Any]:
    p = request.profile
    region = request.region
    return {
        "contact": {
            "name": p.get("fullName") or "Student Name",
            "email": p.get("email") or "student@example.com",
            "phone": region.phone_format,
            "linkedin": "https://linkedin.com/in/profile",
            "location": region.location_format,
        },
        "summary": (
            "Motivated Computer Science student with passion for technology and "
            "problem-solving. Seeking opportunities to apply academic knowledge in "
            "real-world projects."
        ),
        "education": [
            {
                "institution": "University Name",
                "degree": "Bachelor of Technology",
                "field": "Computer Science Engineering",
                "duration": "2021 - 2025",
                "gpa": "8.0/10",
            }
        ],
        "experience": [],
        "skills": {
            "technical": ["JavaScript", "Python", "Java", "HTML/CSS", "Git"],
            "soft": ["Problem Solving", "Team Collaboration", "Communication"],
        },
        "projects": [],
        "certifications": [],
    }


def fallback_profile_optimization(request: GenerationRequest) -> Dict[str, Any]:
    return {
        "profileScore": 60,
        "headline": {
            "current": request.profile.get("headline") or "Student",
            "improved": "Computer Science Student | Full Stack Developer | Seeking SDE Opportunities",
            "reason": "Added specific skills and career intent",
        },
        "summary": {
            "issues": ["Too generic", "No achievements mentioned"],
            "improved": (
                "Passionate Computer Science student with hands-on experience in web "
                "development. Built multiple projects using modern technologies. Seeking "
                "software development opportunities."
            ),
            "tips": ["Add specific technologies", "Include project achievements", "Mention career goals"],
        },
        "skills": {
            "missingSkills": ["React", "Node.js", "MongoDB", "AWS"],
            "skillsToHighlight": ["JavaScript", "Problem Solving"],
        },
        "quickWins": [
            "Add professional photo",
            "Update headline with target role",
            "Get recommendations from professors",
        ],
    }


def fallback_networking_suggestions(request: GenerationRequest) -> Dict[str, Any]:
    region = request.region
    return {
        "targetCompanies": [
            {
                "name": region.companies[0],
                "role": "Software Engineer",
                "why": "Great training programs for freshers",
                "approach": "Highlight academic projects and learning attitude",
            }
        ],
        "connectionMessages": [
            {
                "type": "General",
                "template": (
                    "Hi [Name], I'm a Computer Science student interested in learning about "
                    "the industry. Would love to connect!"
                ),
                "personalization": "Mention their current role or company",
            }
        ],
        "communities": ["Local developer groups", "College alumni networks"],
    }


def fallback_connection_message(request: GenerationRequest) -> Dict[str, Any]:
    return {
        "messages": [
            {
                "type": "Professional",
                "text": (
                    "Hi [Name], I'm a CS student interested in your work at [Company]. "
                    "Would love to connect and learn!"
                ),
                "length": 100,
            }
        ]
    }


_FALLBACKS: Dict[TaskType, Callable[[GenerationRequest], Dict[str, Any]]] = {
    TaskType.RESUME: fallback_resume,
    TaskType.PROFILE_OPTIMIZATION: fallback_profile_optimization,
    TaskType.NETWORKING_SUGGESTIONS: fallback_networking_suggestions,
    TaskType.CONNECTION_MESSAGE: fallback_connection_message,
}


def fallback_for(request: GenerationRequest) -> Dict[str, Any]:
    """Return the static result for the request's task."""
    return _FALLBACKS[request.task](request)
