"""Business type and category registry.

Every lookup table is built once at import time and never mutated. The
registry is checked for exhaustiveness on import: each BusinessType needs an
info entry and exactly one category, so a type added to the enum without
being wired into every table fails loudly instead of falling back silently.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple


class RegistryError(RuntimeError):
    """Raised when the static registry tables disagree with each other."""


class BusinessCategory(str, Enum):
    FOOD_BEVERAGE = "food_beverage"
    BEAUTY_WELLNESS = "beauty_wellness"
    HOME_SERVICES = "home_services"
    PROFESSIONAL_SERVICES = "professional_services"
    HEALTH_MEDICAL = "health_medical"
    AUTOMOTIVE = "automotive"
    PET_SERVICES = "pet_services"
    EVENTS_CREATIVE = "events_creative"
    EDUCATION = "education"
    OTHER = "other"


class BusinessType(str, Enum):
    # Food & Beverage
    RESTAURANT = "restaurant"
    CAFE = "cafe"
    CATERING = "catering"
    FOOD_TRUCK = "food_truck"
    BAKERY = "bakery"
    BAR_LOUNGE = "bar_lounge"
    # Beauty & Wellness
    SALON = "salon"
    SPA = "spa"
    BARBERSHOP = "barbershop"
    NAIL_SALON = "nail_salon"
    MASSAGE = "massage"
    TATTOO_STUDIO = "tattoo_studio"
    # Home Services
    GENERAL_CONTRACTOR = "general_contractor"
    PLUMBER = "plumber"
    ELECTRICIAN = "electrician"
    HVAC = "hvac"
    LANDSCAPING = "landscaping"
    CLEANING = "cleaning"
    HANDYMAN = "handyman"
    PAINTER = "painter"
    ROOFER = "roofer"
    PEST_CONTROL = "pest_control"
    POOL_SERVICE = "pool_service"
    # Professional Services
    CONSULTANT = "consultant"
    LAW_FIRM = "law_firm"
    ACCOUNTING = "accounting"
    MARKETING_AGENCY = "marketing_agency"
    IT_SERVICES = "it_services"
    REAL_ESTATE = "real_estate"
    INSURANCE = "insurance"
    FINANCIAL_ADVISOR = "financial_advisor"
    # Health & Medical
    MEDICAL_PRACTICE = "medical_practice"
    DENTAL = "dental"
    THERAPY = "therapy"
    FITNESS = "fitness"
    CHIROPRACTIC = "chiropractic"
    OPTOMETRY = "optometry"
    # Automotive
    AUTO_REPAIR = "auto_repair"
    AUTO_DETAILING = "auto_detailing"
    TOWING = "towing"
    TIRE_SHOP = "tire_shop"
    # Pet Services
    PET_GROOMING = "pet_grooming"
    VETERINARY = "veterinary"
    PET_SITTING = "pet_sitting"
    DOG_TRAINING = "dog_training"
    # Events & Creative
    PHOTOGRAPHY = "photography"
    VIDEOGRAPHY = "videography"
    DJ_ENTERTAINMENT = "dj_entertainment"
    EVENT_PLANNING = "event_planning"
    FLORIST = "florist"
    WEDDING_SERVICES = "wedding_services"
    # Education
    TUTORING = "tutoring"
    MUSIC_LESSONS = "music_lessons"
    DRIVING_SCHOOL = "driving_school"
    LANGUAGE_SCHOOL = "language_school"
    # Other
    CUSTOM = "custom"


@dataclass(frozen=True)
class CategoryInfo:
    id: BusinessCategory
    label: str
    icon: str
    description: str
    types: Tuple[BusinessType, ...]

    def to_dict(self) -> dict:
        return {
            "id": self.id.value,
            "label": self.label,
            "icon": self.icon,
            "description": self.description,
            "types": [t.value for t in self.types],
        }


@dataclass(frozen=True)
class BusinessTypeInfo:
    id: BusinessType
    label: str
    short_label: str
    icon: str
    description: str
    category: BusinessCategory

    def to_dict(self) -> dict:
        return {
            "id": self.id.value,
            "label": self.label,
            "shortLabel": self.short_label,
            "icon": self.icon,
            "description": self.description,
            "category": self.category.value,
        }


_T = BusinessType
_C = BusinessCategory

BUSINESS_CATEGORIES: Tuple[CategoryInfo, ...] = (
    CategoryInfo(
        _C.FOOD_BEVERAGE,
        "Food & Beverage",
        "utensils",
        "Restaurants, cafes, catering, and food services",
        (_T.RESTAURANT, _T.CAFE, _T.CATERING, _T.FOOD_TRUCK, _T.BAKERY, _T.BAR_LOUNGE),
    ),
    CategoryInfo(
        _C.BEAUTY_WELLNESS,
        "Beauty & Wellness",
        "sparkles",
        "Salons, spas, and personal care services",
        (_T.SALON, _T.SPA, _T.BARBERSHOP, _T.NAIL_SALON, _T.MASSAGE, _T.TATTOO_STUDIO),
    ),
    CategoryInfo(
        _C.HOME_SERVICES,
        "Home Services",
        "home",
        "Contractors, repairs, and maintenance",
        (
            _T.GENERAL_CONTRACTOR,
            _T.PLUMBER,
            _T.ELECTRICIAN,
            _T.HVAC,
            _T.LANDSCAPING,
            _T.CLEANING,
            _T.HANDYMAN,
            _T.PAINTER,
            _T.ROOFER,
            _T.PEST_CONTROL,
            _T.POOL_SERVICE,
        ),
    ),
    CategoryInfo(
        _C.PROFESSIONAL_SERVICES,
        "Professional Services",
        "briefcase",
        "Consulting, legal, financial, and business services",
        (
            _T.CONSULTANT,
            _T.LAW_FIRM,
            _T.ACCOUNTING,
            _T.MARKETING_AGENCY,
            _T.IT_SERVICES,
            _T.REAL_ESTATE,
            _T.INSURANCE,
            _T.FINANCIAL_ADVISOR,
        ),
    ),
    CategoryInfo(
        _C.HEALTH_MEDICAL,
        "Health & Medical",
        "heart-pulse",
        "Medical practices, therapy, and fitness",
        (_T.MEDICAL_PRACTICE, _T.DENTAL, _T.THERAPY, _T.FITNESS, _T.CHIROPRACTIC, _T.OPTOMETRY),
    ),
    CategoryInfo(
        _C.AUTOMOTIVE,
        "Automotive",
        "car",
        "Auto repair, detailing, and vehicle services",
        (_T.AUTO_REPAIR, _T.AUTO_DETAILING, _T.TOWING, _T.TIRE_SHOP),
    ),
    CategoryInfo(
        _C.PET_SERVICES,
        "Pet Services",
        "dog",
        "Grooming, veterinary, and pet care",
        (_T.PET_GROOMING, _T.VETERINARY, _T.PET_SITTING, _T.DOG_TRAINING),
    ),
    CategoryInfo(
        _C.EVENTS_CREATIVE,
        "Events & Creative",
        "camera",
        "Photography, entertainment, and event services",
        (
            _T.PHOTOGRAPHY,
            _T.VIDEOGRAPHY,
            _T.DJ_ENTERTAINMENT,
            _T.EVENT_PLANNING,
            _T.FLORIST,
            _T.WEDDING_SERVICES,
        ),
    ),
    CategoryInfo(
        _C.EDUCATION,
        "Education",
        "graduation-cap",
        "Tutoring, lessons, and training",
        (_T.TUTORING, _T.MUSIC_LESSONS, _T.DRIVING_SCHOOL, _T.LANGUAGE_SCHOOL),
    ),
    CategoryInfo(
        _C.OTHER,
        "Other / Custom",
        "settings",
        "Configure features manually",
        (_T.CUSTOM,),
    ),
)

# id -> (label, short label, icon, description)
_TYPE_DETAILS: Dict[BusinessType, Tuple[str, str, str, str]] = {
    _T.RESTAURANT: ("Restaurant", "Restaurant", "utensils", "Full-service or quick-service restaurant"),
    _T.CAFE: ("Cafe / Coffee Shop", "Cafe", "coffee", "Coffee shop or casual cafe"),
    _T.CATERING: ("Catering Service", "Catering", "chefs-hat", "Event and corporate catering"),
    _T.FOOD_TRUCK: ("Food Truck", "Food Truck", "truck", "Mobile food service"),
    _T.BAKERY: ("Bakery", "Bakery", "cake", "Bakery and pastry shop"),
    _T.BAR_LOUNGE: ("Bar / Lounge", "Bar", "wine", "Bar, pub, or lounge"),
    _T.SALON: ("Hair Salon", "Salon", "scissors", "Hair styling and beauty services"),
    _T.SPA: ("Spa", "Spa", "flower", "Day spa and wellness center"),
    _T.BARBERSHOP: ("Barbershop", "Barbershop", "scissors", "Men's grooming and haircuts"),
    _T.NAIL_SALON: ("Nail Salon", "Nail Salon", "sparkles", "Manicure and pedicure services"),
    _T.MASSAGE: ("Massage Therapy", "Massage", "hand", "Massage and bodywork"),
    _T.TATTOO_STUDIO: ("Tattoo Studio", "Tattoo", "pen-tool", "Tattoo and body art"),
    _T.GENERAL_CONTRACTOR: ("General Contractor", "Contractor", "hard-hat", "Construction and renovation"),
    _T.PLUMBER: ("Plumber", "Plumber", "droplets", "Plumbing services and repairs"),
    _T.ELECTRICIAN: ("Electrician", "Electrician", "zap", "Electrical services and repairs"),
    _T.HVAC: ("HVAC", "HVAC", "thermometer", "Heating, ventilation, and air conditioning"),
    _T.LANDSCAPING: ("Landscaping", "Landscaping", "tree-deciduous", "Lawn care and landscaping"),
    _T.CLEANING: ("Cleaning Service", "Cleaning", "spray-can", "Residential and commercial cleaning"),
    _T.HANDYMAN: ("Handyman", "Handyman", "wrench", "General repairs and maintenance"),
    _T.PAINTER: ("Painter", "Painter", "paintbrush", "Interior and exterior painting"),
    _T.ROOFER: ("Roofer", "Roofer", "home", "Roofing installation and repair"),
    _T.PEST_CONTROL: ("Pest Control", "Pest Control", "bug", "Pest and wildlife removal"),
    _T.POOL_SERVICE: ("Pool Service", "Pool Service", "waves", "Pool cleaning and maintenance"),
    _T.CONSULTANT: ("Consultant", "Consultant", "presentation", "Business or management consulting"),
    _T.LAW_FIRM: ("Law Firm", "Law Firm", "scale", "Legal services"),
    _T.ACCOUNTING: ("Accounting / CPA", "Accounting", "calculator", "Tax and accounting services"),
    _T.MARKETING_AGENCY: ("Marketing Agency", "Marketing", "megaphone", "Marketing and advertising"),
    _T.IT_SERVICES: ("IT Services", "IT Services", "laptop", "Technology and IT support"),
    _T.REAL_ESTATE: ("Real Estate Agent", "Real Estate", "building", "Real estate services"),
    _T.INSURANCE: ("Insurance Agent", "Insurance", "shield", "Insurance services"),
    _T.FINANCIAL_ADVISOR: ("Financial Advisor", "Financial", "trending-up", "Financial planning and wealth management"),
    _T.MEDICAL_PRACTICE: ("Medical Practice", "Medical", "stethoscope", "Doctor's office or clinic"),
    _T.DENTAL: ("Dental Practice", "Dental", "smile", "Dentist office"),
    _T.THERAPY: ("Therapy / Counseling", "Therapy", "heart", "Mental health services"),
    _T.FITNESS: ("Fitness / Personal Training", "Fitness", "dumbbell", "Gym or personal training"),
    _T.CHIROPRACTIC: ("Chiropractic", "Chiropractic", "activity", "Chiropractic services"),
    _T.OPTOMETRY: ("Optometry", "Optometry", "eye", "Eye care and vision services"),
    _T.AUTO_REPAIR: ("Auto Repair Shop", "Auto Repair", "car", "Vehicle repair and maintenance"),
    _T.AUTO_DETAILING: ("Auto Detailing", "Detailing", "sparkles", "Car wash and detailing"),
    _T.TOWING: ("Towing Service", "Towing", "truck", "Towing and roadside assistance"),
    _T.TIRE_SHOP: ("Tire Shop", "Tire Shop", "circle", "Tire sales and service"),
    _T.PET_GROOMING: ("Pet Grooming", "Pet Grooming", "dog", "Dog and pet grooming"),
    _T.VETERINARY: ("Veterinary Clinic", "Vet", "stethoscope", "Animal hospital or vet clinic"),
    _T.PET_SITTING: ("Pet Sitting / Boarding", "Pet Sitting", "home", "Pet care and boarding"),
    _T.DOG_TRAINING: ("Dog Training", "Dog Training", "graduation-cap", "Dog obedience and behavior training"),
    _T.PHOTOGRAPHY: ("Photography", "Photography", "camera", "Photography services"),
    _T.VIDEOGRAPHY: ("Videography", "Video", "video", "Video production services"),
    _T.DJ_ENTERTAINMENT: ("DJ / Entertainment", "DJ", "music", "DJ and entertainment services"),
    _T.EVENT_PLANNING: ("Event Planning", "Events", "calendar", "Event coordination and planning"),
    _T.FLORIST: ("Florist", "Florist", "flower", "Flower arrangements and delivery"),
    _T.WEDDING_SERVICES: ("Wedding Services", "Wedding", "heart", "Wedding planning and coordination"),
    _T.TUTORING: ("Tutoring", "Tutoring", "book-open", "Academic tutoring services"),
    _T.MUSIC_LESSONS: ("Music Lessons", "Music", "music", "Music instruction"),
    _T.DRIVING_SCHOOL: ("Driving School", "Driving", "car", "Driver education"),
    _T.LANGUAGE_SCHOOL: ("Language School", "Language", "globe", "Language instruction"),
    _T.CUSTOM: ("Custom / Other", "Custom", "settings", "Configure features manually"),
}


def _build_registry() -> tuple[dict[BusinessCategory, CategoryInfo], dict[BusinessType, BusinessTypeInfo]]:
    categories: dict[BusinessCategory, CategoryInfo] = {}
    type_category: dict[BusinessType, BusinessCategory] = {}
    for cat in BUSINESS_CATEGORIES:
        if cat.id in categories:
            raise RegistryError(f"duplicate category {cat.id.value}")
        categories[cat.id] = cat
        for btype in cat.types:
            if btype in type_category:
                raise RegistryError(
                    f"business type {btype.value} listed in {type_category[btype].value} and {cat.id.value}"
                )
            type_category[btype] = cat.id

    missing_categories = [c.value for c in BusinessCategory if c not in categories]
    if missing_categories:
        raise RegistryError(f"categories without info: {missing_categories}")

    types: dict[BusinessType, BusinessTypeInfo] = {}
    for btype in BusinessType:
        details = _TYPE_DETAILS.get(btype)
        category = type_category.get(btype)
        if details is None:
            raise RegistryError(f"business type {btype.value} has no info entry")
        if category is None:
            raise RegistryError(f"business type {btype.value} belongs to no category")
        label, short_label, icon, description = details
        types[btype] = BusinessTypeInfo(btype, label, short_label, icon, description, category)
    return categories, types


_CATEGORIES_BY_ID, _TYPES_BY_ID = _build_registry()
_TYPES_BY_VALUE: Dict[str, BusinessType] = {t.value: t for t in BusinessType}
_CATEGORIES_BY_VALUE: Dict[str, BusinessCategory] = {c.value: c for c in BusinessCategory}


def coerce_business_type(value: Any) -> BusinessType | None:
    if isinstance(value, BusinessType):
        return value
    if isinstance(value, str):
        return _TYPES_BY_VALUE.get(value)
    return None


def coerce_category(value: Any) -> BusinessCategory | None:
    if isinstance(value, BusinessCategory):
        return value
    if isinstance(value, str):
        return _CATEGORIES_BY_VALUE.get(value)
    return None


def lookup_type(type_id: Any) -> BusinessTypeInfo | None:
    """Return the registry entry for ``type_id`` or None when it is not a known type."""
    btype = coerce_business_type(type_id)
    if btype is None:
        return None
    return _TYPES_BY_ID[btype]


def get_business_type_info(type_id: Any) -> BusinessTypeInfo:
    return lookup_type(type_id) or _TYPES_BY_ID[BusinessType.CUSTOM]


def category_of(type_id: Any) -> CategoryInfo:
    """Return the category owning ``type_id``; unknown types belong to ``other``."""
    info = lookup_type(type_id)
    if info is None:
        return _CATEGORIES_BY_ID[BusinessCategory.OTHER]
    return _CATEGORIES_BY_ID[info.category]


def get_category_info(category: Any) -> CategoryInfo | None:
    cat = coerce_category(category)
    if cat is None:
        return None
    return _CATEGORIES_BY_ID[cat]


def types_in_category(category: Any) -> Tuple[BusinessType, ...]:
    info = get_category_info(category)
    return info.types if info else ()


def list_categories() -> list[CategoryInfo]:
    return list(BUSINESS_CATEGORIES)


def list_business_types() -> list[BusinessTypeInfo]:
    return [_TYPES_BY_ID[t] for cat in BUSINESS_CATEGORIES for t in cat.types]
