"""
Input Schemas

Pydantic models validating the bodies posted by the admin forms and the
admin API. Each section schema accepts camelCase (wire) or snake_case keys,
ignores unknown keys, and dumps only the keys that were actually sent so a
partial body never overwrites columns with None.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import AfterValidator, AnyUrl, BaseModel, ConfigDict, EmailStr, Field, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

_url_adapter = TypeAdapter(AnyUrl)


def _url_or_empty(value):
    if value:
        try:
            _url_adapter.validate_python(value)
        except ValidationError:
            raise ValueError('Please enter a valid URL')
    return value


def _link_or_empty(value):
    # Call-to-action links may also point at an anchor or a path on the site
    if value and value[0] in '#/':
        return value
    return _url_or_empty(value)


UrlOrEmpty = Annotated[Optional[str], AfterValidator(_url_or_empty)]
LinkOrEmpty = Annotated[Optional[str], AfterValidator(_link_or_empty)]
EmailOrEmpty = Optional[Union[EmailStr, Literal['']]]


class SectionSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra='ignore')

    def to_fields(self):
        """Column values for the store, keyed by model attribute name"""
        return self.model_dump(exclude_unset=True)


class HeroSchema(SectionSchema):
    title: str = Field(min_length=1, max_length=100)
    subtitle: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    image: Optional[str] = None
    cta_text: Optional[str] = Field(None, max_length=50)
    cta_url: LinkOrEmpty = None


class AboutSchema(SectionSchema):
    title: Optional[str] = Field(None, max_length=100)
    description: str = Field(min_length=1, max_length=2000)
    image: UrlOrEmpty = None
    resume_url: UrlOrEmpty = None


class ProjectSchema(SectionSchema):
    title: str = Field(min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    image: UrlOrEmpty = None
    live_url: UrlOrEmpty = None
    github_url: UrlOrEmpty = None
    tech_stack: Optional[str] = Field(None, max_length=200)
    featured: Optional[bool] = None
    order: Optional[int] = Field(None, ge=0)


class SkillSchema(SectionSchema):
    name: str = Field(min_length=1, max_length=50)
    category: str = Field(min_length=1)
    proficiency: int = Field(ge=0, le=100)
    icon: Optional[str] = Field(None, max_length=50)
    order: Optional[int] = Field(None, ge=0)


class ExperienceSchema(SectionSchema):
    company: str = Field(min_length=1, max_length=100)
    role: str = Field(min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=1000)
    start_date: str = Field(min_length=1)
    end_date: Optional[str] = None
    location: Optional[str] = Field(None, max_length=100)
    order: Optional[int] = Field(None, ge=0)


class ContactSchema(SectionSchema):
    email: EmailOrEmpty = None
    phone: Optional[str] = Field(None, max_length=20)
    location: Optional[str] = Field(None, max_length=100)
    github: UrlOrEmpty = None
    linkedin: UrlOrEmpty = None
    twitter: UrlOrEmpty = None
    website: UrlOrEmpty = None


class LoginSchema(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)


def format_errors(exc):
    """Flatten a pydantic ValidationError into [{field, message}] for JSON and flash messages"""
    return [
        {
            'field': '.'.join(str(part) for part in err['loc']) or 'body',
            'message': err['msg'],
        }
        for err in exc.errors()
    ]
