"""
Test fixtures for generating test data.
"""

from copy import deepcopy
from datetime import date
from typing import Any, Dict, List

from matching import ResolvedPlace, StaticLocationResolver, StaticSkillsTaxonomy
from models.project import ProjectRequirements
from models.talent import TalentProfile

# Reference date used for skill recency in every test
AS_OF = date(2025, 6, 1)

BC_INTERIOR_PLACES: List[Dict[str, Any]] = [
    {"name": "Kelowna", "latitude": 49.8880, "longitude": -119.4960, "population": 222748,
     "region": "BC Interior", "isTransitHub": True},
    {"name": "Kamloops", "latitude": 50.6745, "longitude": -120.3273, "population": 90280,
     "region": "BC Interior", "isTransitHub": True},
    {"name": "Penticton", "latitude": 49.4991, "longitude": -119.5937, "population": 33761,
     "region": "BC Interior"},
    {"name": "Vernon", "latitude": 50.2671, "longitude": -119.2720, "population": 40116,
     "region": "BC Interior"},
    {"name": "Nelson", "latitude": 49.4928, "longitude": -117.2948, "population": 10572,
     "region": "BC Interior"},
    {"name": "Prince George", "latitude": 54.2297, "longitude": -122.7544, "population": 74003,
     "region": "Northern BC", "isTransitHub": True},
]


def create_test_resolver() -> StaticLocationResolver:
    """Resolver over a small table of BC Interior places."""
    return StaticLocationResolver(ResolvedPlace.model_validate(place) for place in BC_INTERIOR_PLACES)


def create_test_taxonomy() -> StaticSkillsTaxonomy:
    return StaticSkillsTaxonomy({
        "frontend": ["React", "Vue", "Angular", "TypeScript"],
        "backend": ["Python", "Django", "Node.js", "PostgreSQL"],
        "design": ["Figma", "UX Research"],
        "devops": ["Docker", "Kubernetes"],
    })


def create_test_talent_payload(talent_id: str = "talent_001", **overrides: Any) -> Dict[str, Any]:
    """Raw camelCase talent payload; top-level keys can be overridden."""
    payload = {
        "id": talent_id,
        "firstName": "Jordan",
        "lastName": "Lee",
        "location": {"city": "Kelowna", "province": "BC", "country": "Canada"},
        "skills": [
            {
                "skillName": "React",
                "experienceLevel": "expert",
                "yearsOfExperience": 5,
                "verified": True,
                "endorsements": 5,
                "lastUsed": "2025-05-01",
            },
            {
                "skillName": "TypeScript",
                "experienceLevel": "advanced",
                "yearsOfExperience": 4,
                "lastUsed": "2025-05-15",
            },
        ],
        "hourlyRate": {"min": 60, "max": 80},
        "availability": {
            "hoursPerWeek": 40,
            "startDate": "2025-06-15",
            "workArrangement": "hybrid",
        },
        "experience": {
            "totalYears": 6,
            "relevantYears": 4,
            "completedProjects": 15,
            "successRate": 92,
        },
        "reputation": {
            "rating": 4.6,
            "reviewCount": 12,
            "responseTime": 2,
            "reliability": 90,
        },
        "portfolio": {"projectCount": 10, "relevantProjects": 6, "hasRelevantWork": True},
        "verification": {
            "identityVerified": True,
            "skillsVerified": True,
            "backgroundChecked": False,
            "referencesChecked": False,
        },
    }
    payload.update(deepcopy(overrides))
    return payload


def create_test_project_payload(project_id: str = "project_001", **overrides: Any) -> Dict[str, Any]:
    """Raw camelCase project payload; top-level keys can be overridden."""
    payload = {
        "id": project_id,
        "title": "Customer portal rebuild",
        "skills": [
            {
                "skillName": "React",
                "importance": "required",
                "experienceLevel": "intermediate",
                "yearsRequired": 2,
            },
            {"skillName": "TypeScript", "importance": "preferred"},
        ],
        "location": {"city": "Kelowna", "province": "BC", "country": "Canada"},
        "locationPreferences": {"maxRadius": 50, "workArrangement": "hybrid"},
        "budget": {"min": 50, "max": 90, "type": "hourly"},
        "timeline": {"startDate": "2025-07-01", "duration": 12},
        "experienceLevel": "intermediate",
        "workArrangement": "hybrid",
        "clientType": "sme",
    }
    payload.update(deepcopy(overrides))
    return payload


def create_test_talent(talent_id: str = "talent_001", **overrides: Any) -> TalentProfile:
    """Create a valid talent profile based in Kelowna."""
    return TalentProfile.model_validate(create_test_talent_payload(talent_id, **overrides))


def create_test_project(project_id: str = "project_001", **overrides: Any) -> ProjectRequirements:
    """Create a valid hybrid React project based in Kelowna."""
    return ProjectRequirements.model_validate(create_test_project_payload(project_id, **overrides))
