"""Schemas for the four admin panels.

A single generic store/controller pair is instantiated per schema; everything
entity-specific (fields, filters, validation rules, seed data, card layout)
is declared here.
"""
from typing import Any, Dict, List

from domain import constants as c
from domain import sample_data
from domain.models import DateRange, EntitySchema, FieldSpec
from utils.dates import format_short_date, format_submission


def _compliance_to_lines(entries) -> str:
    return "\n".join(
        f"{e.get('title') or ''}: {e.get('description') or ''}".rstrip(': ')
        for e in (entries or []) if isinstance(e, dict)
    )


def _lines_to_compliance(text) -> List[Dict[str, Any]]:
    entries = []
    for line in (text or '').splitlines():
        if not line.strip():
            continue
        title, _, desc = line.partition(':')
        entries.append({'title': title.strip(), 'description': desc.strip(),
                        'document': None, 'visibility': True})
    return entries


def _date_span(start: str, end: str):
    return lambda r: f"{format_short_date(r.get(start))} - {format_short_date(r.get(end))}"


BANNER = EntitySchema(
    key='banner',
    storage_key='constructpro_banners',
    singular='Banner',
    plural='Banners',
    title='Banner Management',
    filter_field='status',
    filter_options=c.PUBLISH_STATUSES,
    filter_titles={'active': 'Active Banners', 'inactive': 'Inactive Banners',
                   'scheduled': 'Scheduled Banners'},
    required=[('title', 'Banner title is required'),
              ('page', 'Page placement is required')],
    date_range=DateRange('startDate', 'endDate'),
    seed=sample_data.sample_banners,
    defaults={
        'title': '', 'description': '', 'type': 'image', 'page': '',
        'status': 'active', 'priority': 1, 'heading': '', 'subHeading': '',
        'ctaText': 'Learn More', 'ctaUrl': '', 'alignment': 'center',
        'imageUrl': None, 'isVisible': True,
    },
    toggle=('active', 'inactive'),
    toggle_messages={'active': 'Banner activated', 'inactive': 'Banner deactivated'},
    tag=('page', c.BANNER_PAGES),
    status=('status', c.PUBLISH_STATUSES),
    card_meta=[
        ('Type', lambda r: str(r.get('type') or '').capitalize()),
        ('Priority', lambda r: str(r.get('priority', '—'))),
        ('Schedule', _date_span('startDate', 'endDate')),
    ],
    excerpt_field='description',
    empty_message='create your first banner to get started',
    form_fields=[
        FieldSpec('title', 'Banner Title', required=True),
        FieldSpec('description', 'Description', 'textarea'),
        FieldSpec('page', 'Page Placement', 'select', c.BANNER_PAGES, required=True),
        FieldSpec('startDate', 'Start Date', 'date', required=True),
        FieldSpec('endDate', 'End Date', 'date', required=True),
        FieldSpec('status', 'Status', 'select', c.PUBLISH_STATUSES),
        FieldSpec('priority', 'Priority', 'select', c.PRIORITIES),
        FieldSpec('heading', 'Heading'),
        FieldSpec('subHeading', 'Sub Heading'),
        FieldSpec('ctaText', 'Button Text'),
        FieldSpec('ctaUrl', 'Button URL'),
        FieldSpec('alignment', 'Text Alignment', 'radio', c.ALIGNMENTS),
        FieldSpec('isVisible', 'Visible on website', 'checkbox'),
    ],
)


CAREER = EntitySchema(
    key='career',
    storage_key='constructpro_careers',
    singular='Posting',
    plural='Postings',
    title='Career Management',
    filter_field='status',
    filter_options=c.PUBLISH_STATUSES,
    filter_titles={'active': 'Active Postings', 'inactive': 'Inactive Postings',
                   'scheduled': 'Scheduled Postings'},
    required=[('title', 'Career title is required'),
              ('department', 'Department is required')],
    date_range=DateRange('startDate', 'endDate'),
    seed=sample_data.sample_careers,
    defaults={
        'title': '', 'description': '', 'department': '', 'type': 'full-time',
        'location': '', 'requirements': '', 'responsibilities': '',
        'status': 'active', 'priority': 1, 'applicationUrl': '', 'isVisible': True,
    },
    toggle=('active', 'inactive'),
    toggle_messages={'active': 'Posting activated', 'inactive': 'Posting deactivated'},
    tag=('department', c.CAREER_DEPARTMENTS),
    status=('status', c.PUBLISH_STATUSES),
    card_meta=[
        ('Type', lambda r: c.label_for(c.CAREER_TYPES, r.get('type'))),
        ('Location', lambda r: r.get('location') or '—'),
        ('Open', _date_span('startDate', 'endDate')),
    ],
    excerpt_field='description',
    empty_message='create your first posting to get started',
    form_fields=[
        FieldSpec('title', 'Job Title', required=True),
        FieldSpec('description', 'Description', 'textarea'),
        FieldSpec('department', 'Department', 'select', c.CAREER_DEPARTMENTS, required=True),
        FieldSpec('type', 'Employment Type', 'select', c.CAREER_TYPES),
        FieldSpec('location', 'Location'),
        FieldSpec('requirements', 'Requirements', 'textarea'),
        FieldSpec('responsibilities', 'Responsibilities', 'textarea'),
        FieldSpec('status', 'Status', 'select', c.PUBLISH_STATUSES),
        FieldSpec('priority', 'Priority', 'select', c.PRIORITIES),
        FieldSpec('startDate', 'Start Date', 'date', required=True),
        FieldSpec('endDate', 'End Date', 'date', required=True),
        FieldSpec('applicationUrl', 'Application URL'),
        FieldSpec('isVisible', 'Visible on website', 'checkbox'),
    ],
)


CONTACT = EntitySchema(
    key='contact',
    storage_key='constructpro_contacts',
    singular='Enquiry',
    plural='Enquiries',
    title='Contact Management',
    filter_field='enquiryType',
    filter_options=c.ENQUIRY_TYPES,
    filter_titles={v: f"{label} Enquiries" for v, label in c.ENQUIRY_TYPES},
    required=[('fullName', 'Full name is required'),
              ('email', 'Email is required'),
              ('enquiryType', 'Enquiry type is required'),
              ('message', 'Message is required')],
    seed=sample_data.sample_contacts,
    id_strategy='sequence',
    read_transition=('new', 'read'),
    unknown_filter_matches_all=False,
    defaults={
        'fullName': '', 'email': '', 'mobile': '', 'enquiryType': 'general',
        'enquirySource': 'Website Contact Form', 'message': '',
        'ipAddress': None, 'status': 'new',
    },
    title_field='fullName',
    tag=('enquiryType', c.ENQUIRY_TYPES),
    status=('status', c.CONTACT_STATUSES),
    card_meta=[
        ('Email', lambda r: r.get('email') or '—'),
        ('Mobile', lambda r: r.get('mobile') or '—'),
        ('Source', lambda r: r.get('enquirySource') or '—'),
        ('Submitted', lambda r: format_submission(r.get('submissionDate'))),
    ],
    excerpt_field='message',
    empty_message='new enquiries will appear here',
    form_fields=[
        FieldSpec('fullName', 'Full Name', required=True),
        FieldSpec('email', 'Email', required=True),
        FieldSpec('mobile', 'Mobile'),
        FieldSpec('enquiryType', 'Enquiry Type', 'select', c.ENQUIRY_TYPES, required=True),
        FieldSpec('enquirySource', 'Source', 'select', c.ENQUIRY_SOURCES),
        FieldSpec('message', 'Message', 'textarea', required=True),
        FieldSpec('status', 'Status', 'select', c.CONTACT_STATUSES),
    ],
)


PROJECT = EntitySchema(
    key='project',
    storage_key='constructpro_projects',
    singular='Project',
    plural='Projects',
    title='Project Management',
    filter_field='status',
    filter_options=c.PROJECT_STATUSES,
    filter_titles={'upcoming': 'Upcoming Projects', 'ongoing': 'Ongoing Projects',
                   'completed': 'Completed Projects', 'on-hold': 'On Hold Projects'},
    required=[('title', 'Project title is required'),
              ('industry', 'Industry is required')],
    date_range=DateRange('startDate', 'expectedCompletion',
                         'Start and completion dates are required',
                         'Completion date must be after start date'),
    seed=sample_data.sample_projects,
    defaults={
        'title': '', 'slug': '', 'code': '', 'industry': '',
        'type': 'new-construction', 'status': 'upcoming', 'visibility': 'public',
        'featured': False, 'priority': 1, 'clientName': '',
        'clientType': 'private-company', 'clientLogo': None,
        'confidentialClient': False, 'city': '', 'state': '', 'country': '',
        'siteAddress': '', 'mapsUrl': '', 'actualCompletion': None,
        'warranty': '', 'builtArea': '', 'plotArea': '', 'floors': 0,
        'units': 0, 'costRange': '', 'shortDescription': '',
        'detailedOverview': '', 'scope': '', 'challenges': '', 'solutions': '',
        'achievements': '', 'highlights': [], 'images': [], 'services': [],
        'compliance': [], 'metaTitle': '', 'metaDescription': '',
        'seoKeywords': '', 'canonical': '', 'ogImage': None,
        'createdBy': 'Admin', 'updatedBy': 'Admin',
    },
    toggle=('ongoing', 'on-hold'),
    toggle_messages={'ongoing': 'Project resumed', 'on-hold': 'Project held'},
    toggle_labels=('Hold', 'Resume'),
    tag=('industry', c.PROJECT_INDUSTRIES),
    status=('status', c.PROJECT_STATUSES),
    card_meta=[
        ('Code', lambda r: r.get('code') or '—'),
        ('Client', lambda r: 'Confidential' if r.get('confidentialClient') else (r.get('clientName') or '—')),
        ('Location', lambda r: ', '.join(p for p in (r.get('city'), r.get('state')) if p) or '—'),
        ('Timeline', _date_span('startDate', 'expectedCompletion')),
    ],
    excerpt_field='shortDescription',
    empty_message='create your first project to get started',
    form_fields=[
        FieldSpec('title', 'Project Title', required=True),
        FieldSpec('slug', 'Slug'),
        FieldSpec('code', 'Project Code'),
        FieldSpec('industry', 'Industry', 'select', c.PROJECT_INDUSTRIES, required=True),
        FieldSpec('type', 'Project Type', 'select', c.PROJECT_TYPES),
        FieldSpec('status', 'Status', 'select', c.PROJECT_STATUSES),
        FieldSpec('visibility', 'Visibility', 'select', c.PROJECT_VISIBILITY),
        FieldSpec('featured', 'Featured project', 'checkbox'),
        FieldSpec('priority', 'Priority', 'select', c.PRIORITIES),
        FieldSpec('clientName', 'Client Name'),
        FieldSpec('clientType', 'Client Type', 'select', c.CLIENT_TYPES),
        FieldSpec('confidentialClient', 'Confidential client', 'checkbox'),
        FieldSpec('city', 'City'),
        FieldSpec('state', 'State'),
        FieldSpec('country', 'Country'),
        FieldSpec('siteAddress', 'Site Address'),
        FieldSpec('mapsUrl', 'Maps URL'),
        FieldSpec('startDate', 'Start Date', 'date', required=True),
        FieldSpec('expectedCompletion', 'Expected Completion', 'date', required=True),
        FieldSpec('actualCompletion', 'Actual Completion', 'date'),
        FieldSpec('warranty', 'Warranty'),
        FieldSpec('builtArea', 'Built-up Area'),
        FieldSpec('plotArea', 'Plot Area'),
        FieldSpec('floors', 'Floors', 'number'),
        FieldSpec('units', 'Units', 'number'),
        FieldSpec('costRange', 'Cost Range'),
        FieldSpec('shortDescription', 'Short Description', 'textarea'),
        FieldSpec('detailedOverview', 'Detailed Overview', 'textarea'),
        FieldSpec('scope', 'Scope', 'textarea'),
        FieldSpec('challenges', 'Challenges', 'textarea'),
        FieldSpec('solutions', 'Solutions', 'textarea'),
        FieldSpec('achievements', 'Achievements', 'textarea'),
        FieldSpec('services', 'Services', 'multiselect', c.PROJECT_SERVICES),
        FieldSpec('compliance', 'Compliance', 'textarea',
                  help='One entry per line, as "Title: description"',
                  to_form=_compliance_to_lines, from_form=_lines_to_compliance),
        FieldSpec('metaTitle', 'Meta Title'),
        FieldSpec('metaDescription', 'Meta Description', 'textarea'),
        FieldSpec('seoKeywords', 'SEO Keywords'),
    ],
)


SCHEMAS = {s.key: s for s in (BANNER, CAREER, CONTACT, PROJECT)}
