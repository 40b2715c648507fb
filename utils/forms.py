"""
Forms Module - Decodes the dashboard form into a profile update

Field names follow the bracket convention, so ``experience[0][title]``
addresses the ``title`` of the first experience entry and a trailing
``[]`` collects every submitted value into a list.
"""

import re
from dataclasses import dataclass
from typing import List, Optional
from .data import (
    CONTACT_FIELDS, as_list, normalize_experience, normalize_service
)


_KEY_SEGMENT = re.compile(r'\[([^\[\]]*)\]')


def split_key(key):
    """Split ``a[b][0][]`` into ``['a', 'b', '0', '']``"""
    base, bracket, rest = key.partition('[')
    if not bracket or not base:
        return [key]
    segments = _KEY_SEGMENT.findall(bracket + rest)
    if ''.join(f'[{s}]' for s in segments) != bracket + rest:
        return [key]
    return [base] + segments


def _segment_name(segment, position):
    # Numeric segments after the base name are list indexes
    return int(segment) if position > 0 and segment.isdigit() else segment


def _listify(node):
    if isinstance(node, dict):
        if node and all(isinstance(k, int) for k in node):
            return [_listify(node[k]) for k in sorted(node)]
        return {k: _listify(v) for k, v in node.items()}
    return node


def parse_nested_form(form):
    """
    Build nested dicts and lists from a flat form

    Args:
        form (MultiDict): Submitted form fields

    Returns:
        dict: Decoded structure
    """
    result = {}
    for key in form.keys():
        values = form.getlist(key)
        segments = split_key(key)
        collect = len(segments) > 1 and segments[-1] == ''
        if collect:
            segments = segments[:-1]
        if '' in segments:
            # [] is only understood as the last segment
            segments, collect = [key], False

        node = result
        for position, segment in enumerate(segments[:-1]):
            name = _segment_name(segment, position)
            child = node.get(name)
            if not isinstance(child, dict):
                child = {}
                node[name] = child
            node = child

        name = _segment_name(segments[-1], len(segments) - 1)
        if collect or len(values) > 1:
            node[name] = list(values)
        else:
            node[name] = values[0]

    return _listify(result)


def _submitted(data, name):
    value = data.get(name)
    if value is None or value == '':
        return None
    return value


def _is_blank(entry):
    return all(not value for value in entry.values())


def coerce_experience(value):
    entries = [normalize_experience(e) for e in as_list(value)]
    for entry in entries:
        entry['description'] = [line for line in entry['description'] if line.strip()]
    return [e for e in entries if not _is_blank(e)]


def coerce_services(value):
    entries = [normalize_service(s) for s in as_list(value)]
    return [s for s in entries if not _is_blank(s)]


def coerce_skills(value):
    skills = [skill if isinstance(skill, str) else str(skill) for skill in as_list(value)]
    return [skill.strip() for skill in skills if skill and skill.strip()]


@dataclass
class ProfileUpdate:
    """
    Changes submitted from the dashboard

    Hero text and contact fields always replace the stored values.
    Fields left as None keep whatever the profile already holds.
    """
    hero_title: str = ''
    hero_name: str = ''
    hero_description: str = ''
    contact_phone: str = ''
    contact_email: str = ''
    contact_location: str = ''
    contact_whatsapp: str = ''
    contact_instagram: str = ''
    image: Optional[str] = None
    experience: Optional[List[dict]] = None
    services: Optional[List[dict]] = None
    skills: Optional[List[str]] = None

    @classmethod
    def from_form(cls, form, image=None):
        data = parse_nested_form(form)

        def text(name):
            value = data.get(name)
            if isinstance(value, list):
                value = value[-1] if value else ''
            return value if isinstance(value, str) else ''

        experience = _submitted(data, 'experience')
        services = _submitted(data, 'services')
        skills = _submitted(data, 'skills')

        return cls(
            hero_title=text('heroTitle'),
            hero_name=text('heroName'),
            hero_description=text('heroDescription'),
            contact_phone=text('contactPhone'),
            contact_email=text('contactEmail'),
            contact_location=text('contactLocation'),
            contact_whatsapp=text('contactWhatsapp'),
            contact_instagram=text('contactInstagram'),
            image=image,
            experience=coerce_experience(experience) if experience is not None else None,
            services=coerce_services(services) if services is not None else None,
            skills=coerce_skills(skills) if skills is not None else None,
        )

    def apply(self, profile):
        """Return a new profile document with this update applied"""
        hero = dict(profile.get('hero') or {})
        hero['title'] = self.hero_title
        hero['name'] = self.hero_name
        hero['description'] = self.hero_description
        if self.image:
            hero['image'] = self.image

        updated = dict(profile)
        updated['hero'] = hero
        if self.experience is not None:
            updated['experience'] = self.experience
        if self.services is not None:
            updated['services'] = self.services
        if self.skills is not None:
            updated['skills'] = self.skills

        contact = {
            'phone': self.contact_phone,
            'email': self.contact_email,
            'location': self.contact_location,
            'whatsapp_link': self.contact_whatsapp,
            'instagram_link': self.contact_instagram,
        }
        updated['contact'] = {field: contact.get(field, '') for field in CONTACT_FIELDS}
        return updated
