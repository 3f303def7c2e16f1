"""
Prompt Builder Layer
====================

Renders one natural-language instruction per generation task.

Responsibilities:
- Embeds the user's profile data verbatim (lists and objects as JSON)
- States market conventions taken from the requested RegionProfile
- Ends every prompt with the exact JSON shape expected back, including
  field names and example values; the response normalizer relies on the
  model echoing that shape

Invariants:
- Missing inputs are substituted with empty containers or a descriptive
  placeholder, never omitted from the rendered prompt
- No sanitization of user text: the consumer is a language model
- Every schema example contains all required keys of its task
"""

import json
from typing import Any, Callable, Dict

from scholar.regions import RegionProfile
from scholar.tasks import GenerationRequest, TaskType

# ── Output contract footer ────────────────────────────────────────────────────
JSON_INSTRUCTION = "Return ONLY valid JSON with this exact structure:"


def _as_json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False)


def _schema_block(example: Dict[str, Any]) -> str:
    return f"{JSON_INSTRUCTION}\n{json.dumps(example, indent=2, ensure_ascii=False)}"


def _market_label(region: RegionProfile) -> str:
    if region.code == "global":
        return "the global job market"
    return f"the {region.market_name} job market"


# ── Schema examples ───────────────────────────────────────────────────────────

def resume_schema_example(region: RegionProfile) -> Dict[str, Any]:
    return {
        "contact": {
            "name": "Full Name",
            "email": "email@example.com",
            "phone": region.phone_format,
            "linkedin": "https://linkedin.com/in/profile",
            "location": region.location_format,
            "github": "https://github.com/username",
        },
        "summary": (
            "2-3 sentence professional summary highlighting key skills and career "
            f"goals for an entry-level position in {_market_label(region)}"
        ),
        "education": [
            {
                "institution": "University/College Name",
                "degree": "Bachelor of Technology",
                "field": "Computer Science Engineering",
                "duration": "2021 - 2025",
                "gpa": "8.5/10",
                "location": region.location_format,
                "achievements": ["Dean's List", "Academic Excellence Award"],
            }
        ],
        "experience": [
            {
                "title": "Software Development Intern",
                "company": "Company Name",
                "duration": "Jun 2024 - Aug 2024",
                "location": region.location_format,
                "type": "Internship",
                "achievements": [
                    "Developed web application using React and Node.js, increasing user engagement by 25%",
                    "Collaborated with team of 5 developers using Agile methodology",
                    "Implemented RESTful APIs serving 1000+ daily requests",
                ],
            }
        ],
        "skills": {
            "technical": ["JavaScript", "React", "Node.js", "MongoDB", "Python", "Java", "Git", "AWS"],
            "soft": ["Problem Solving", "Team Collaboration", "Communication", "Leadership", "Time Management"],
        },
        "projects": [
            {
                "name": "E-commerce Web Application",
                "description": "Full-stack e-commerce platform with user authentication and payment integration",
                "technologies": ["React", "Node.js", "MongoDB", "Stripe API"],
                "duration": "Mar 2024 - May 2024",
                "achievements": [
                    "Built responsive frontend serving 500+ concurrent users",
                    "Deployed on AWS with CI/CD pipeline",
                ],
                "github": "https://github.com/username/ecommerce-app",
                "demo": "https://project-demo.com",
            }
        ],
        "certifications": ["AWS Certified Cloud Practitioner", "MongoDB Certified Developer"],
        "achievements": ["Winner - College Hackathon 2024", "Led team of 10 students in technical society"],
    }


def profile_optimization_schema_example(region: RegionProfile) -> Dict[str, Any]:
    return {
        "profileScore": 75,
        "headline": {
            "current": "current headline text",
            "improved": f"Computer Science Student | React Developer | Seeking SDE Role at {region.companies[0]}",
            "reason": f"Added specific skills and career intent with a focus on {_market_label(region)}",
        },
        "summary": {
            "issues": ["Too generic", "No quantified achievements", "Missing industry keywords"],
            "improved": (
                "Passionate Computer Science student with hands-on experience in full-stack "
                "development. Built 5+ web applications using React and Node.js."
            ),
            "tips": [
                "Add specific project numbers and metrics",
                "Include technologies relevant to local employers",
                "Mention collaboration and team skills",
            ],
        },
        "skills": {
            "missingSkills": ["System Design", "Data Structures", "Algorithms", "Docker"],
            "skillsToHighlight": ["JavaScript", "React", "Problem Solving"],
            "industrySpecific": ["Microservices", "Cloud Computing", "DevOps"],
        },
        "quickWins": [
            "Add professional headshot photo",
            "Get 3+ recommendations from professors/colleagues",
            "Update headline with target role and key skills",
            "Share technical articles or project updates weekly",
        ],
    }


def networking_schema_example(region: RegionProfile) -> Dict[str, Any]:
    return {
        "targetCompanies": [
            {
                "name": region.companies[0],
                "role": "Software Development Engineer",
                "why": "Strong graduate programs and engineering culture",
                "keyPeople": ["Engineering Managers", "Senior Engineers", "Campus Recruiters"],
                "approach": "Highlight relevant projects and passion for the product",
            }
        ],
        "connectionMessages": [
            {
                "type": "Alumni Connection",
                "template": (
                    "Hi [Name], I'm a final year CSE student at [University]. I noticed you're "
                    "working as [Role] at [Company]. Would you be open to a brief conversation "
                    "about your journey?"
                ),
                "personalization": "Mention specific projects or achievements from their profile",
            }
        ],
        "events": [
            {
                "name": "Local Tech Meetup",
                "type": "In-person networking",
                "frequency": "Monthly",
                "benefit": "Meet local developers and startup founders",
            }
        ],
        "communities": ["Google Developer Groups", "[City] Developers Community"],
    }


CONNECTION_MESSAGE_SCHEMA_EXAMPLE: Dict[str, Any] = {
    "messages": [
        {
            "type": "Brief & Professional",
            "text": (
                "Hi [Name], I'm a CSE student interested in [Company/Role]. Your work in "
                "[specific area] is inspiring. Would love to connect and learn from your experience!"
            ),
            "length": 150,
        },
        {
            "type": "Project-based",
            "text": (
                "Hello [Name], I recently built a [project type] similar to your work at "
                "[Company]. I'd appreciate connecting to learn from your expertise in [technology]."
            ),
            "length": 180,
        },
        {
            "type": "Career-focused",
            "text": (
                "Hi [Name], As an aspiring [role] looking to start my career in [industry], "
                "I'd value connecting with experienced professionals like you at [Company]."
            ),
            "length": 160,
        },
    ]
}


# ── Task prompts ──────────────────────────────────────────────────────────────

def build_resume_prompt(request: GenerationRequest) -> str:
    p = request.profile
    region = request.region
    market = _market_label(region)
    return f"""Generate a professional ATS-optimized resume in JSON format for a college student targeting {market}.

Profile Data:
- Name: {p.get('fullName') or 'Student Name'}
- Email: {p.get('email') or 'student@example.com'}
- Headline: {p.get('headline') or 'Computer Science Student'}
- Summary: {p.get('summary') or 'Motivated student seeking opportunities'}
- Experience: {_as_json(p.get('experience') or [])}
- Education: {_as_json(p.get('education') or [])}
- Skills: {_as_json(p.get('skills') or [])}
- Projects: {_as_json(p.get('projects') or [])}
- Target Role: {request.effective_target_role}

Create a resume optimized for {market} with:
- Action verbs and quantified achievements
- ATS-friendly keywords
- Contact format: phone as "{region.phone_format}", location as "{region.location_format}"
- Skills relevant to employers such as {', '.join(region.companies)}
- Resume style: {region.resume_style}
- Projects that show practical application

{_schema_block(resume_schema_example(region))}"""


def build_profile_optimization_prompt(request: GenerationRequest) -> str:
    p = request.profile
    region = request.region
    market = _market_label(region)
    return f"""Analyze this LinkedIn profile for a college student and provide detailed optimization suggestions for {market}.

Current Profile:
- Name: {p.get('fullName') or 'Student'}
- Headline: {p.get('headline') or 'Student'}
- Summary: {p.get('summary') or 'No summary provided'}
- Experience: {_as_json(p.get('experience') or [])}
- Education: {_as_json(p.get('education') or [])}
- Skills: {_as_json(p.get('skills') or [])}
- Target Role: {request.effective_target_role}
- Industry Focus: {request.effective_industry}

Provide optimization suggestions for {market} focusing on:
- Keywords recruiters at companies like {', '.join(region.companies[:3])} search for
- Industry-specific terminology
- Achievement quantification
- Professional networking in {region.market_name if region.code != 'global' else 'your target market'}

The "profileScore" field must be an integer from 0 to 100.

{_schema_block(profile_optimization_schema_example(region))}"""


def build_networking_prompt(request: GenerationRequest) -> str:
    p = request.profile
    region = request.region
    market = _market_label(region)
    return f"""Generate networking suggestions for a college student looking for {request.effective_target_role} opportunities in {market}.

Student Profile:
- Name: {p.get('fullName') or 'Student'}
- Education: {_as_json(p.get('education') or [])}
- Skills: {_as_json(p.get('skills') or [])}
- Experience: {_as_json(p.get('experience') or [])}
- Location: {p.get('location') or region.location_format}
- Target Industry: {request.effective_industry}

Provide a networking strategy for {market} including:
- Target companies and roles (for example {', '.join(region.companies)})
- Connection message templates
- Industry events and communities
- Professional development suggestions

{_schema_block(networking_schema_example(region))}"""


def build_connection_message_prompt(request: GenerationRequest) -> str:
    p = request.profile
    t = request.target
    region = request.region
    return f"""Generate a personalized LinkedIn connection message for a college student.

Student: {p.get('fullName') or 'Student'} ({p.get('headline') or 'Computer Science Student'})
Target: {t.get('name') or 'Professional'} ({t.get('role') or 'Professional'} at {t.get('company') or 'Company'})
Context: {request.context or 'general networking'}

Requirements:
- Professional but friendly tone
- Mention specific reason for connecting
- Keep under 300 characters (LinkedIn limit)
- Appropriate for the professional culture of {_market_label(region)}
- Show genuine interest and value proposition

Generate 3 different message options.
{_schema_block(CONNECTION_MESSAGE_SCHEMA_EXAMPLE)}"""


_BUILDERS: Dict[TaskType, Callable[[GenerationRequest], str]] = {
    TaskType.RESUME: build_resume_prompt,
    TaskType.PROFILE_OPTIMIZATION: build_profile_optimization_prompt,
    TaskType.NETWORKING_SUGGESTIONS: build_networking_prompt,
    TaskType.CONNECTION_MESSAGE: build_connection_message_prompt,
}


def build_prompt(request: GenerationRequest) -> str:
    """Render the prompt for the request's task."""
    return _BUILDERS[request.task](request)
