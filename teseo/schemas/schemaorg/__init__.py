"""
Schema.org entities rendered as JSON-LD script blocks.
"""

from teseo.schemas.schemaorg.types import (
    AggregateRating,
    ContactPoint,
    GeoCoordinates,
    ImageObject,
    Offer,
    Organization,
    Person,
    PostalAddress,
    Rating,
    Review,
    SchemaOrgEntity,
    SchemaOrgNode,
    new_organization,
    new_person,
)
from teseo.schemas.schemaorg.article import Article, new_article
from teseo.schemas.schemaorg.breadcrumb_list import (
    BreadcrumbList,
    ListItem,
    new_breadcrumb_list,
    new_breadcrumb_list_from_url,
)
from teseo.schemas.schemaorg.event import Event, Place, new_event
from teseo.schemas.schemaorg.faq_page import (
    Answer,
    FAQPage,
    Question,
    new_answer,
    new_faq_page,
    new_question,
)
from teseo.schemas.schemaorg.local_business import LocalBusiness, new_local_business
from teseo.schemas.schemaorg.product import Brand, Product, new_product
from teseo.schemas.schemaorg.site_navigation import (
    ItemList,
    ItemListElement,
    SiteNavigationElement,
    new_item_list,
    new_item_list_element,
    new_site_navigation_element,
    new_site_navigation_element_with_item_list,
)
from teseo.schemas.schemaorg.webpage import WebPage, new_webpage
from teseo.schemas.schemaorg.website import Action, Target, WebSite, new_website

__all__ = [
    # Shared types
    "AggregateRating",
    "ContactPoint",
    "GeoCoordinates",
    "ImageObject",
    "Offer",
    "Organization",
    "Person",
    "PostalAddress",
    "Rating",
    "Review",
    "SchemaOrgEntity",
    "SchemaOrgNode",
    "new_organization",
    "new_person",
    # Entities
    "Article",
    "new_article",
    "BreadcrumbList",
    "ListItem",
    "new_breadcrumb_list",
    "new_breadcrumb_list_from_url",
    "Event",
    "Place",
    "new_event",
    "Answer",
    "FAQPage",
    "Question",
    "new_answer",
    "new_faq_page",
    "new_question",
    "LocalBusiness",
    "new_local_business",
    "Brand",
    "Product",
    "new_product",
    "ItemList",
    "ItemListElement",
    "SiteNavigationElement",
    "new_item_list",
    "new_item_list_element",
    "new_site_navigation_element",
    "new_site_navigation_element_with_item_list",
    "WebPage",
    "new_webpage",
    "Action",
    "Target",
    "WebSite",
    "new_website",
]
