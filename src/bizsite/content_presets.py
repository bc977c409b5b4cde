"""Category-level marketing copy applied when a tenant picks a business type."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .business_types import BusinessCategory, RegistryError, category_of
from .config import DEFAULT_STORE_NAME
from .template_render import render_template


@dataclass(frozen=True)
class TrustBadge:
    text: str
    icon: str

    def to_dict(self) -> dict:
        return {"text": self.text, "icon": self.icon}


@dataclass(frozen=True)
class ProcessStep:
    step: int
    title: str
    description: str
    icon: str

    def to_dict(self) -> dict:
        return {"step": self.step, "title": self.title, "description": self.description, "icon": self.icon}


@dataclass(frozen=True)
class ContentPreset:
    hero_heading: str
    hero_heading_accent: str
    hero_subheading: str
    hero_badge_text: str
    hero_cta_text: str
    hero_secondary_cta_text: str
    trust_badges: Tuple[TrustBadge, ...]
    process_steps: Tuple[ProcessStep, ...]
    process_title: str
    process_subtitle: str
    process_cta_text: str
    why_choose_us_title: str
    why_choose_us_heading: str
    why_choose_us_text: str
    emergency_banner_text: str
    emergency_banner_enabled: bool

    def to_settings(self) -> dict:
        """Project the preset onto RuntimeSettings keys."""
        return {
            "heroHeading": self.hero_heading,
            "heroHeadingAccent": self.hero_heading_accent,
            "heroSubheading": self.hero_subheading,
            "heroBadgeText": self.hero_badge_text,
            "heroCTAText": self.hero_cta_text,
            "heroSecondaryCTAText": self.hero_secondary_cta_text,
            "trustBadges": [b.to_dict() for b in self.trust_badges],
            "process": [s.to_dict() for s in self.process_steps],
            "processTitle": self.process_title,
            "processSubtitle": self.process_subtitle,
            "processCTAText": self.process_cta_text,
            "whyChooseUsTitle": self.why_choose_us_title,
            "whyChooseUsHeading": self.why_choose_us_heading,
            "whyChooseUsText": self.why_choose_us_text,
            "emergencyBannerText": self.emergency_banner_text,
            "emergencyBannerEnabled": self.emergency_banner_enabled,
        }


# RuntimeSettings keys owned by content presets.
PRESET_SETTING_KEYS: Tuple[str, ...] = (
    "heroHeading",
    "heroHeadingAccent",
    "heroSubheading",
    "heroBadgeText",
    "heroCTAText",
    "heroSecondaryCTAText",
    "trustBadges",
    "process",
    "processTitle",
    "processSubtitle",
    "processCTAText",
    "whyChooseUsTitle",
    "whyChooseUsHeading",
    "whyChooseUsText",
    "emergencyBannerText",
    "emergencyBannerEnabled",
)

_WHY_TITLE = "Why Choose {{ business_name | default('Us', true) }}?"


def _steps(*items: tuple[str, str, str]) -> Tuple[ProcessStep, ...]:
    return tuple(ProcessStep(idx, title, desc, icon) for idx, (title, desc, icon) in enumerate(items, start=1))


def _badges(*items: tuple[str, str]) -> Tuple[TrustBadge, ...]:
    return tuple(TrustBadge(text, icon) for text, icon in items)


_C = BusinessCategory

CATEGORY_CONTENT_PRESETS: Dict[BusinessCategory, ContentPreset] = {
    _C.FOOD_BEVERAGE: ContentPreset(
        hero_heading="Delicious Food",
        hero_heading_accent="Made Fresh Daily",
        hero_subheading="Experience exceptional cuisine and unforgettable flavors",
        hero_badge_text="Locally Owned",
        hero_cta_text="View Our Menu",
        hero_secondary_cta_text="Make a Reservation",
        trust_badges=_badges(("Fresh Ingredients", "leaf"), ("Made with Love", "heart"), ("5-Star Rated", "star")),
        process_steps=_steps(
            ("Browse Our Menu", "Explore our delicious offerings", "menu"),
            ("Place Your Order", "Order online or call us", "phone"),
            ("Enjoy!", "Savor every bite", "utensils"),
        ),
        process_title="How It Works",
        process_subtitle="Simple ordering for delicious food",
        process_cta_text="Order Now",
        why_choose_us_title=_WHY_TITLE,
        why_choose_us_heading="Quality You Can Taste",
        why_choose_us_text="We use only the freshest ingredients and time-honored recipes to create dishes that delight.",
        emergency_banner_text="",
        emergency_banner_enabled=False,
    ),
    _C.BEAUTY_WELLNESS: ContentPreset(
        hero_heading="Look & Feel",
        hero_heading_accent="Your Best",
        hero_subheading="Expert care and personalized attention for stunning results",
        hero_badge_text="Award-Winning Service",
        hero_cta_text="Book Now",
        hero_secondary_cta_text="Our Services",
        trust_badges=_badges(
            ("Licensed Professionals", "award"), ("Premium Products", "sparkles"), ("5-Star Reviews", "star")
        ),
        process_steps=_steps(
            ("Book Your Appointment", "Choose a time that works for you", "calendar"),
            ("Consultation", "We discuss your goals", "message-circle"),
            ("Transformation", "Leave feeling amazing", "sparkles"),
        ),
        process_title="Your Experience",
        process_subtitle="From booking to beautiful",
        process_cta_text="Book Your Appointment",
        why_choose_us_title=_WHY_TITLE,
        why_choose_us_heading="Excellence in Every Detail",
        why_choose_us_text=(
            "Our skilled professionals use premium products and techniques to ensure you look and feel "
            "your absolute best."
        ),
        emergency_banner_text="",
        emergency_banner_enabled=False,
    ),
    _C.HOME_SERVICES: ContentPreset(
        hero_heading="Professional",
        hero_heading_accent="Home Services",
        hero_subheading="Licensed, insured, and committed to quality workmanship",
        hero_badge_text="Trusted Local Experts",
        hero_cta_text="Get a Free Quote",
        hero_secondary_cta_text="Our Services",
        trust_badges=_badges(
            ("Licensed & Insured", "shield-check"),
            ("Satisfaction Guaranteed", "award"),
            ("Free Estimates", "check-circle"),
        ),
        process_steps=_steps(
            ("Request a Quote", "Contact us for a free estimate", "clipboard"),
            ("We Assess & Plan", "Our experts evaluate your needs", "search"),
            ("Quality Work Done", "Professional service, guaranteed", "check-circle"),
        ),
        process_title="Our Simple Process",
        process_subtitle="From estimate to completion",
        process_cta_text="Get Your Free Quote",
        why_choose_us_title=_WHY_TITLE,
        why_choose_us_heading="Quality You Can Trust",
        why_choose_us_text=(
            "With years of experience and a commitment to excellence, we deliver results that exceed "
            "expectations. Fully licensed and insured for your peace of mind."
        ),
        emergency_banner_text="24/7 Emergency Service Available!",
        emergency_banner_enabled=True,
    ),
    _C.PROFESSIONAL_SERVICES: ContentPreset(
        hero_heading="Expert",
        hero_heading_accent="Professional Services",
        hero_subheading="Strategic guidance and solutions tailored to your needs",
        hero_badge_text="Trusted Advisors",
        hero_cta_text="Schedule a Consultation",
        hero_secondary_cta_text="Our Services",
        trust_badges=_badges(("Certified Experts", "award"), ("Proven Results", "trending-up"), ("Client-Focused", "users")),
        process_steps=_steps(
            ("Schedule a Consultation", "Book a free discovery call", "calendar"),
            ("Strategy Session", "We develop a custom plan", "clipboard"),
            ("Implementation", "Execute with expert guidance", "check-circle"),
        ),
        process_title="How We Work",
        process_subtitle="A proven approach to success",
        process_cta_text="Get Started",
        why_choose_us_title=_WHY_TITLE,
        why_choose_us_heading="Results-Driven Excellence",
        why_choose_us_text=(
            "We combine deep expertise with a client-first approach to deliver measurable results and lasting value."
        ),
        emergency_banner_text="",
        emergency_banner_enabled=False,
    ),
    _C.HEALTH_MEDICAL: ContentPreset(
        hero_heading="Compassionate",
        hero_heading_accent="Healthcare",
        hero_subheading="Personalized care focused on your health and wellbeing",
        hero_badge_text="Board Certified",
        hero_cta_text="Book an Appointment",
        hero_secondary_cta_text="Our Services",
        trust_badges=_badges(
            ("Board Certified", "award"), ("Patient-Centered", "heart"), ("Accepting New Patients", "user-plus")
        ),
        process_steps=_steps(
            ("Schedule Visit", "Book your appointment online", "calendar"),
            ("Consultation", "Meet with our care team", "stethoscope"),
            ("Treatment Plan", "Personalized care for you", "clipboard"),
        ),
        process_title="Your Care Journey",
        process_subtitle="Simple steps to better health",
        process_cta_text="Book Now",
        why_choose_us_title=_WHY_TITLE,
        why_choose_us_heading="Care You Can Count On",
        why_choose_us_text=(
            "Our dedicated team provides compassionate, evidence-based care in a comfortable environment. "
            "Your health is our priority."
        ),
        emergency_banner_text="",
        emergency_banner_enabled=False,
    ),
    _C.AUTOMOTIVE: ContentPreset(
        hero_heading="Expert",
        hero_heading_accent="Auto Care",
        hero_subheading="Honest service and quality repairs you can trust",
        hero_badge_text="ASE Certified",
        hero_cta_text="Get a Quote",
        hero_secondary_cta_text="Our Services",
        trust_badges=_badges(
            ("ASE Certified", "award"), ("Fair Pricing", "dollar-sign"), ("Warranty Included", "shield-check")
        ),
        process_steps=_steps(
            ("Bring It In", "Drop off or schedule service", "car"),
            ("Free Inspection", "We diagnose the issue", "search"),
            ("Quality Repair", "Expert work, fair prices", "wrench"),
        ),
        process_title="Simple Service Process",
        process_subtitle="Getting you back on the road",
        process_cta_text="Schedule Service",
        why_choose_us_title=_WHY_TITLE,
        why_choose_us_heading="Honest Service You Trust",
        why_choose_us_text=(
            "We treat your vehicle like our own. Fair pricing, quality parts, and honest recommendations, every time."
        ),
        emergency_banner_text="Emergency Towing Available 24/7!",
        emergency_banner_enabled=True,
    ),
    _C.PET_SERVICES: ContentPreset(
        hero_heading="Loving Care",
        hero_heading_accent="For Your Pet",
        hero_subheading="Professional pet care with a personal touch",
        hero_badge_text="Pet Lovers Serving Pets",
        hero_cta_text="Book Now",
        hero_secondary_cta_text="Our Services",
        trust_badges=_badges(
            ("Certified & Insured", "shield-check"), ("Pet First Aid Trained", "heart"), ("5-Star Rated", "star")
        ),
        process_steps=_steps(
            ("Book Appointment", "Choose your service and time", "calendar"),
            ("Meet & Greet", "We get to know your pet", "heart"),
            ("Happy Pet!", "Quality care, wagging tails", "smile"),
        ),
        process_title="How It Works",
        process_subtitle="Easy booking, happy pets",
        process_cta_text="Book Your Pet's Visit",
        why_choose_us_title=_WHY_TITLE,
        why_choose_us_heading="Because Pets Are Family",
        why_choose_us_text="We treat every pet like our own. Professional, gentle care with lots of love included.",
        emergency_banner_text="Emergency Pet Care Available!",
        emergency_banner_enabled=False,
    ),
    _C.EVENTS_CREATIVE: ContentPreset(
        hero_heading="Capture Your",
        hero_heading_accent="Special Moments",
        hero_subheading="Creative professionals bringing your vision to life",
        hero_badge_text="Award-Winning Work",
        hero_cta_text="Get a Quote",
        hero_secondary_cta_text="View Portfolio",
        trust_badges=_badges(
            ("Award-Winning", "award"), ("Professional Equipment", "camera"), ("5-Star Reviews", "star")
        ),
        process_steps=_steps(
            ("Share Your Vision", "Tell us about your event", "message-circle"),
            ("Plan Together", "We create a custom plan", "clipboard"),
            ("Create Magic", "Beautiful results delivered", "sparkles"),
        ),
        process_title="The Creative Process",
        process_subtitle="From concept to creation",
        process_cta_text="Start Your Project",
        why_choose_us_title=_WHY_TITLE,
        why_choose_us_heading="Creativity Meets Excellence",
        why_choose_us_text=(
            "We blend artistic vision with technical expertise to create stunning results that exceed expectations."
        ),
        emergency_banner_text="",
        emergency_banner_enabled=False,
    ),
    _C.EDUCATION: ContentPreset(
        hero_heading="Unlock Your",
        hero_heading_accent="Full Potential",
        hero_subheading="Expert instruction tailored to your learning style",
        hero_badge_text="Proven Results",
        hero_cta_text="Book a Lesson",
        hero_secondary_cta_text="Our Programs",
        trust_badges=_badges(
            ("Certified Instructors", "award"), ("Personalized Learning", "user"), ("Proven Results", "trending-up")
        ),
        process_steps=_steps(
            ("Assessment", "We evaluate your current level", "clipboard"),
            ("Custom Plan", "Personalized curriculum for you", "book-open"),
            ("Progress & Success", "Achieve your goals", "trophy"),
        ),
        process_title="Your Learning Journey",
        process_subtitle="Step by step to success",
        process_cta_text="Start Learning",
        why_choose_us_title=_WHY_TITLE,
        why_choose_us_heading="Education That Works",
        why_choose_us_text="Our proven methods and dedicated instructors help students of all levels achieve their goals.",
        emergency_banner_text="",
        emergency_banner_enabled=False,
    ),
    _C.OTHER: ContentPreset(
        hero_heading="Professional",
        hero_heading_accent="Services",
        hero_subheading="Quality service you can count on",
        hero_badge_text="Trusted Business",
        hero_cta_text="Contact Us",
        hero_secondary_cta_text="Our Services",
        trust_badges=_badges(("Professional", "award"), ("Reliable", "check-circle"), ("Quality Work", "star")),
        process_steps=_steps(
            ("Contact Us", "Tell us about your needs", "phone"),
            ("Consultation", "We discuss solutions", "message-circle"),
            ("Delivery", "Quality service delivered", "check-circle"),
        ),
        process_title="Our Process",
        process_subtitle="Simple and effective",
        process_cta_text="Get Started",
        why_choose_us_title=_WHY_TITLE,
        why_choose_us_heading="Quality You Can Trust",
        why_choose_us_text="We're committed to delivering exceptional service with integrity and professionalism.",
        emergency_banner_text="",
        emergency_banner_enabled=False,
    ),
}

if BusinessCategory.OTHER not in CATEGORY_CONTENT_PRESETS:
    raise RegistryError("the other content preset is required as the fallback")


def _render_context(business_name: str | None) -> dict[str, Any]:
    # The unconfigured store name keeps the generic "Why Choose Us?" copy.
    if not business_name or business_name == DEFAULT_STORE_NAME:
        return {}
    return {"business_name": business_name}


def get_content_preset(business_type: Any, business_name: str | None = None) -> ContentPreset:
    """Resolve type -> category -> preset and render its copy.

    Falls back to the ``other`` preset. The result never contains template
    markup; ``CATEGORY_CONTENT_PRESETS`` holds the unrendered templates.
    """
    category = category_of(business_type).id
    preset = CATEGORY_CONTENT_PRESETS.get(category)
    if preset is None:
        preset = CATEGORY_CONTENT_PRESETS[BusinessCategory.OTHER]
    return render_content_preset(preset, _render_context(business_name))


def render_content_preset(preset: ContentPreset, context: dict[str, Any] | None = None) -> ContentPreset:
    changes: dict[str, Any] = {}
    for field in dataclasses.fields(preset):
        value = getattr(preset, field.name)
        if isinstance(value, str):
            changes[field.name] = render_template(value, context)
    changes["trust_badges"] = tuple(
        TrustBadge(render_template(b.text, context), b.icon) for b in preset.trust_badges
    )
    changes["process_steps"] = tuple(
        ProcessStep(s.step, render_template(s.title, context), render_template(s.description, context), s.icon)
        for s in preset.process_steps
    )
    return dataclasses.replace(preset, **changes)


def preset_settings(business_type: Any, business_name: str | None = None) -> dict:
    """Rendered preset values keyed the way RuntimeSettings stores them."""
    return get_content_preset(business_type, business_name).to_settings()
