HEALTH_ENDPOINT = "/health"

PERSONAL_INFO_ENDPOINT = "/personal-info"

WORK_EXPERIENCE_ENDPOINT = "/work-experience"
WORK_EXPERIENCE_ITEM_ENDPOINT = "/work-experience/{entry_id}"

EDUCATION_ENDPOINT = "/education"
EDUCATION_ITEM_ENDPOINT = "/education/{entry_id}"

SKILLS_ENDPOINT = "/skills"
SKILLS_ITEM_ENDPOINT = "/skills/{entry_id}"

AWARDS_CERTIFICATIONS_ENDPOINT = "/awards-certifications"
AWARDS_CERTIFICATIONS_ITEM_ENDPOINT = "/awards-certifications/{entry_id}"

PORTFOLIO_PROJECTS_ENDPOINT = "/portfolio-projects"
PORTFOLIO_PROJECTS_ITEM_ENDPOINT = "/portfolio-projects/{entry_id}"

CONTACT_FORMS_ENDPOINT = "/contact-forms"
