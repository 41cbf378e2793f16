"""
This module contains centralized constants used throughout the application,
ensuring a single source of truth for option lists (pages, statuses,
departments, industries, enquiry types) shared by the stores and the views.

Each option list is a sequence of (value, label) pairs.
"""

# --- Banners ---
BANNER_PAGES = [
    ("homepage", "Homepage"),
    ("services", "Services"),
    ("projects", "Projects"),
    ("about", "About Us"),
    ("contact", "Contact"),
]

BANNER_TYPES = [("image", "Image")]

# Shared by banners and careers
PUBLISH_STATUSES = [
    ("active", "Active"),
    ("inactive", "Inactive"),
    ("scheduled", "Scheduled"),
]

ALIGNMENTS = [("left", "Left"), ("center", "Center"), ("right", "Right")]

PRIORITIES = [(n, str(n)) for n in range(1, 6)]

# --- Careers ---
CAREER_DEPARTMENTS = [
    ("engineering", "Engineering"),
    ("marketing", "Marketing"),
    ("hr", "HR"),
    ("finance", "Finance"),
    ("operations", "Operations"),
]

CAREER_TYPES = [
    ("full-time", "Full-time"),
    ("part-time", "Part-time"),
    ("contract", "Contract"),
    ("internship", "Internship"),
]

# --- Contacts ---
ENQUIRY_TYPES = [
    ("general", "General Contact"),
    ("project", "Project Enquiry"),
    ("service", "Service Enquiry"),
    ("registration", "Registration"),
    ("career", "Career Enquiry"),
]

ENQUIRY_SOURCES = [
    ("Website Contact Form", "Website Contact Form"),
    ("Project Page", "Project Page"),
    ("Service Page", "Service Page"),
    ("Registration Page", "Registration Page"),
]

CONTACT_STATUSES = [("new", "New"), ("read", "Read")]

# --- Projects ---
PROJECT_INDUSTRIES = [
    ("residential", "Residential"),
    ("commercial", "Commercial"),
    ("industrial", "Industrial"),
    ("infrastructure", "Infrastructure"),
    ("institutional", "Institutional"),
]

PROJECT_TYPES = [
    ("new-construction", "New Construction"),
    ("renovation", "Renovation"),
    ("turnkey", "Turnkey"),
    ("epc", "EPC"),
]

PROJECT_STATUSES = [
    ("upcoming", "Upcoming"),
    ("ongoing", "Ongoing"),
    ("completed", "Completed"),
    ("on-hold", "On Hold"),
]

PROJECT_VISIBILITY = [("public", "Public"), ("private", "Private")]

CLIENT_TYPES = [
    ("individual", "Individual"),
    ("government", "Government"),
    ("private-company", "Private Company"),
]

PROJECT_SERVICES = [
    ("civil-construction", "Civil Construction"),
    ("structural-work", "Structural Work"),
    ("interior-fit-out", "Interior Fit-Out"),
    ("electrical-plumbing", "Electrical & Plumbing"),
    ("project-management", "Project Management"),
    ("turnkey-solutions", "Turnkey Solutions"),
]


def label_for(options, value, default: str = 'N/A') -> str:
    return next((label for v, label in options if v == value), default)
