"""Seed collections used when a panel has nothing stored yet (or the blob is corrupt).

Each function returns a fresh list so callers may mutate it freely.
"""
from typing import Any, Dict, List


def sample_banners() -> List[Dict[str, Any]]:
    return [
        {
            "id": 1,
            "title": "Summer Construction Sale",
            "description": "Promotional banner for summer discounts",
            "type": "image",
            "page": "homepage",
            "status": "active",
            "priority": 1,
            "startDate": "2024-06-01",
            "endDate": "2024-06-30",
            "heading": "Summer Construction Sale",
            "subHeading": "Up to 30% off all services",
            "ctaText": "Get Quote",
            "ctaUrl": "/contact",
            "alignment": "center",
            "imageUrl": None,
            "isVisible": True,
            "createdAt": "2024-05-15T10:30:00",
            "updatedAt": "2024-05-15T10:30:00",
        },
        {
            "id": 2,
            "title": "Project Showcase",
            "description": "Showcase our latest construction projects",
            "type": "image",
            "page": "projects",
            "status": "scheduled",
            "priority": 2,
            "startDate": "2024-07-01",
            "endDate": "2024-07-31",
            "heading": "Our Latest Projects",
            "subHeading": "See our construction excellence",
            "ctaText": "View Projects",
            "ctaUrl": "/projects",
            "alignment": "left",
            "imageUrl": None,
            "isVisible": True,
            "createdAt": "2024-05-20T14:15:00",
            "updatedAt": "2024-05-20T14:15:00",
        },
    ]


def sample_careers() -> List[Dict[str, Any]]:
    return [
        {
            "id": 1,
            "title": "Senior Civil Engineer",
            "description": "Lead construction projects and teams",
            "department": "engineering",
            "type": "full-time",
            "location": "Pune, India",
            "status": "active",
            "priority": 1,
            "startDate": "2024-06-01",
            "endDate": "2024-12-31",
            "requirements": "5+ years experience, BE Civil",
            "responsibilities": "Project management, site supervision",
            "applicationUrl": "/apply/engineer",
            "isVisible": True,
            "createdAt": "2024-05-15T10:30:00",
            "updatedAt": "2024-05-15T10:30:00",
        },
        {
            "id": 2,
            "title": "Marketing Specialist",
            "description": "Handle digital marketing for construction services",
            "department": "marketing",
            "type": "part-time",
            "location": "Remote",
            "status": "scheduled",
            "priority": 2,
            "startDate": "2024-07-01",
            "endDate": "2024-07-31",
            "requirements": "3+ years in marketing, SEO knowledge",
            "responsibilities": "Content creation, social media",
            "applicationUrl": "/apply/marketing",
            "isVisible": True,
            "createdAt": "2024-05-20T14:15:00",
            "updatedAt": "2024-05-20T14:15:00",
        },
    ]


def sample_contacts() -> List[Dict[str, Any]]:
    return [
        {
            "id": 1,
            "enquiryId": "ENQ-0001",
            "fullName": "Rahul Sharma",
            "email": "rahul.sharma@email.com",
            "mobile": "+91 98765 43210",
            "enquiryType": "project",
            "enquirySource": "Project Page",
            "message": "Interested in your residential project in Pune. Can you share estimated cost and timeline?",
            "submissionDate": "2025-02-10T14:30:00",
            "ipAddress": "122.167.45.89",
            "status": "new",
            "createdAt": "2025-02-10T14:30:00",
            "updatedAt": "2025-02-10T14:30:00",
        },
        {
            "id": 2,
            "enquiryId": "ENQ-0002",
            "fullName": "Priya Patil",
            "email": "priya.patil@gmail.com",
            "mobile": "+91 97654 32109",
            "enquiryType": "career",
            "enquirySource": "Career Enquiry",
            "message": "I have 5 years experience in civil engineering. Are there any openings?",
            "submissionDate": "2025-02-12T09:15:00",
            "ipAddress": "117.232.78.45",
            "status": "read",
            "createdAt": "2025-02-12T09:15:00",
            "updatedAt": "2025-02-12T09:15:00",
        },
    ]


def sample_projects() -> List[Dict[str, Any]]:
    return [
        {
            "id": 1,
            "title": "Luxury Residential Complex",
            "slug": "luxury-residential-complex",
            "code": "RES-001",
            "industry": "residential",
            "type": "new-construction",
            "status": "ongoing",
            "visibility": "public",
            "featured": True,
            "priority": 1,
            "clientName": "Elite Builders",
            "clientType": "private-company",
            "clientLogo": None,
            "confidentialClient": False,
            "city": "Mumbai",
            "state": "Maharashtra",
            "country": "India",
            "siteAddress": "Marine Drive",
            "mapsUrl": "https://maps.google.com",
            "startDate": "2024-01-01",
            "expectedCompletion": "2025-12-31",
            "actualCompletion": None,
            "warranty": "2 years",
            "builtArea": "500000 sq ft",
            "plotArea": "10 acres",
            "floors": 20,
            "units": 150,
            "costRange": "500 Cr",
            "shortDescription": "High-end residential project",
            "detailedOverview": "Detailed description here",
            "scope": "Full construction",
            "challenges": "Urban location constraints",
            "solutions": "Innovative engineering",
            "achievements": "On-time phase 1 completion",
            "highlights": [{"text": "Green certified", "icon": "leaf"}],
            "images": [
                {"url": None, "category": "cover", "caption": "Main view",
                 "primary": True, "alt": "Project view", "visibility": True},
            ],
            "services": ["civil-construction", "structural-work"],
            "compliance": [
                {"title": "RERA", "description": "Registered", "document": None, "visibility": True},
            ],
            "metaTitle": "Luxury Residential in Mumbai",
            "metaDescription": "Premium construction project",
            "seoKeywords": "residential, luxury, mumbai",
            "canonical": "/projects/residential/luxury",
            "ogImage": None,
            "createdBy": "Admin",
            "updatedBy": "Admin",
            "createdAt": "2024-05-15T10:30:00",
            "updatedAt": "2024-05-15T10:30:00",
        },
        {
            "id": 2,
            "title": "Commercial Office Tower",
            "slug": "commercial-office-tower",
            "code": "COM-001",
            "industry": "commercial",
            "type": "turnkey",
            "status": "completed",
            "visibility": "public",
            "featured": False,
            "priority": 2,
            "clientName": "Tech Corp",
            "clientType": "private-company",
            "clientLogo": None,
            "confidentialClient": False,
            "city": "Bangalore",
            "state": "Karnataka",
            "country": "India",
            "siteAddress": "MG Road",
            "mapsUrl": "https://maps.google.com",
            "startDate": "2023-06-01",
            "expectedCompletion": "2024-03-31",
            "actualCompletion": "2024-03-15",
            "warranty": "1 year",
            "builtArea": "300000 sq ft",
            "plotArea": "5 acres",
            "floors": 15,
            "units": 50,
            "costRange": "300 Cr",
            "shortDescription": "Modern office space",
            "detailedOverview": "Detailed description here",
            "scope": "Turnkey delivery",
            "challenges": "Tight deadline",
            "solutions": "Efficient management",
            "achievements": "Under budget",
            "highlights": [{"text": "LEED certified", "icon": "certificate"}],
            "images": [
                {"url": None, "category": "completed", "caption": "Exterior",
                 "primary": True, "alt": "Tower view", "visibility": True},
            ],
            "services": ["interior-fit-out", "electrical-plumbing"],
            "compliance": [
                {"title": "ISO 9001", "description": "Compliant", "document": None, "visibility": True},
            ],
            "metaTitle": "Commercial Tower in Bangalore",
            "metaDescription": "Completed office project",
            "seoKeywords": "commercial, office, bangalore",
            "canonical": "/projects/commercial/tower",
            "ogImage": None,
            "createdBy": "Admin",
            "updatedBy": "Admin",
            "createdAt": "2024-05-20T14:15:00",
            "updatedAt": "2024-05-20T14:15:00",
        },
    ]
