"""
HTML fragment generators for the placeholder renderer.

Every generator takes one section of the content document and returns an
HTML fragment. Absent sections produce an empty string and absent lists
inside a section produce no items, so a sparse document never aborts a build.
Values are inserted literally; the content author is trusted.
"""

from .content import section_items
from .icons import social_icon, tech_chip

SERVICE_SEPARATOR_STYLE = 'border-bottom: 1px solid var(--border); padding-bottom: 12px; margin-bottom: 12px;'


def _chips(values):
    return ''.join(tech_chip(value) for value in values or [])


def generate_social_links(social_links):
    """Generate the row of social icon links."""
    links = []
    for link in social_links or []:
        icon = social_icon(link.get('icon'))
        name = link.get('name', '')
        links.append(
            f'<a href="{link.get("url", "")}" target="_blank" rel="noopener noreferrer" '
            f'title="{name}" aria-label="{name}" style="text-decoration: none">{icon}</a>'
        )
    return ''.join(links)


def generate_services_section(services):
    """Generate the services card. The last offering gets no separator."""
    if not services:
        return ''

    offerings = section_items(services, 'offerings')
    items = []
    for index, service in enumerate(offerings):
        is_last = index == len(offerings) - 1
        border_style = '' if is_last else SERVICE_SEPARATOR_STYLE
        items.append(f'''
        <div class="service-item" style="display: flex; {border_style}">
          <div style="width: 34px; height: 34px; border-radius: 8px; background: rgba(20, 184, 166, 0.12); display: flex; align-items: center; justify-content: center; font-weight: 700; color: var(--accent);">
            {service.get('icon', '')}
          </div>
          <div>
            <h4>{service.get('title', '')}</h4>
            <div class="service-desc">{service.get('description', '')}</div>
          </div>
        </div>
      ''')

    return f'''
    <section class="card" style="margin-top: 18px">
      <div style="display: flex; align-items: center; justify-content: space-between">
        <div>
          <div style="font-weight: 700">{services.get('title', '')}</div>
          <div style="color: var(--muted); font-size: 13px; margin-top: 6px">
            {services.get('subtitle', '')}
          </div>
        </div>
        <div style="display: flex; gap: 8px; align-items: center">
          <a class="btn btn-primary" href="{services.get('topmateUrl', '')}" target="_blank" rel="noopener">Book on Topmate</a>
        </div>
      </div>
      <div class="services" style="margin-top: 12px">
        {''.join(items)}
      </div>
    </section>
  '''


def generate_about_section(about):
    """Generate the about card with description, technologies and interests."""
    if not about:
        return ''

    descriptions = ''.join(
        f'<p style="margin: 0 0 16px 0; line-height: 1.6">{paragraph}</p>'
        for paragraph in section_items(about, 'description')
    )
    technologies = _chips(section_items(about, 'technologies'))
    interests = _chips(section_items(about, 'interests'))

    return f'''
    <section class="card" style="margin-top: 18px">
      <div style="display: flex; align-items: center; justify-content: space-between; margin-bottom: 16px">
        <div>
          <div style="font-weight: 700; font-size: 20px">{about.get('title', '')}</div>
          <div style="color: var(--muted); font-size: 14px; margin-top: 4px">{about.get('subtitle', '')}</div>
        </div>
      </div>
      <div style="display: grid; grid-template-columns: 2fr 1fr; gap: 20px; align-items: start">
        <div>
          {descriptions}
        </div>
        <div>
          <div style="margin-bottom: 16px">
            <h4 style="margin: 0 0 8px 0; font-size: 14px; color: var(--muted)">Core Technologies</h4>
            <div style="display: flex; flex-wrap: wrap; gap: 6px">
              {technologies}
            </div>
          </div>
          <div>
            <h4 style="margin: 0 0 8px 0; font-size: 14px; color: var(--muted)">Interests</h4>
            <div style="display: flex; flex-wrap: wrap; gap: 6px">
              {interests}
            </div>
          </div>
        </div>
      </div>
    </section>
  '''


def _section_card(section, body, heading_margin, gap):
    return f'''
    <section class="card" style="margin-top: 18px">
      <div style="margin-bottom: {heading_margin}px">
        <div style="font-weight: 700; font-size: 20px">{section.get('title', '')}</div>
        <div style="color: var(--muted); font-size: 14px; margin-top: 4px">{section.get('subtitle', '')}</div>
      </div>
      <div style="display: flex; flex-direction: column; gap: {gap}px">
        {body}
      </div>
    </section>
  '''


def generate_projects_section(projects):
    """Generate the projects card."""
    if not projects:
        return ''

    items = []
    for project in section_items(projects):
        items.append(f'''
        <div class="project">
          <div style="display: flex; justify-content: space-between; align-items: flex-start; margin-bottom: 8px">
            <h3>{project.get('title', '')}</h3>
            <div style="display: flex; gap: 6px">
              {_chips(project.get('technologies'))}
            </div>
          </div>
          <p>{project.get('description', '')}</p>
          <div style="margin-top: 8px; font-size: 13px; color: var(--muted)">
            Key achievements: {project.get('achievements', '')}
          </div>
        </div>
      ''')

    return _section_card(projects, ''.join(items), 20, 16)


def generate_side_projects_section(side_projects):
    """Generate the side projects card."""
    if not side_projects:
        return ''

    items = []
    for project in section_items(side_projects):
        items.append(f'''
        <div class="project" style="padding: 12px">
          <div style="display: flex; justify-content: space-between; align-items: flex-start; margin-bottom: 6px">
            <h3 style="margin: 0; font-size: 15px">{project.get('name', '')}</h3>
            <div style="font-size: 12px; color: var(--muted)">{project.get('year', '')}</div>
          </div>
          <div style="display: flex; flex-wrap: wrap; gap: 6px; margin: 0 0 6px 0">
            {_chips(project.get('technologies'))}
          </div>
          <p style="margin: 0; color: var(--muted); font-size: 14px">{project.get('description', '')}</p>
        </div>
      ''')

    return _section_card(side_projects, ''.join(items), 18, 14)


def generate_experience_section(experience):
    """Generate the experience timeline card."""
    if not experience:
        return ''

    items = []
    for job in section_items(experience):
        achievements = ''.join(f'<li>{achievement}</li>' for achievement in job.get('achievements') or [])
        items.append(f'''
        <div style="border-left: 3px solid var(--accent); padding-left: 16px">
          <div style="display: flex; justify-content: space-between; align-items: flex-start; margin-bottom: 8px">
            <div>
              <h3 style="margin: 0; font-size: 16px">{job.get('role', '')}</h3>
              <div style="color: var(--accent); font-size: 14px; margin-top: 2px">{job.get('company', '')}</div>
            </div>
            <div style="font-size: 13px; color: var(--muted)">{job.get('period', '')}</div>
          </div>
          <div style="margin-bottom: 12px">
            <div style="display: flex; flex-wrap: wrap; gap: 6px">
              {_chips(job.get('technologies'))}
            </div>
          </div>
          <ul style="margin: 0; padding-left: 20px; color: var(--muted); font-size: 14px">
            {achievements}
          </ul>
        </div>
      ''')

    return _section_card(experience, ''.join(items), 20, 20)
