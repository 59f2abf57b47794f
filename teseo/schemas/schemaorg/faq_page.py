"""
Schema.org FAQPage with its questions and accepted answers.
"""

from typing import ClassVar

from pydantic import Field

from teseo.schemas.schemaorg.types import SchemaOrgEntity, SchemaOrgNode


class Answer(SchemaOrgNode):
    SCHEMA_TYPE: ClassVar[str] = "Answer"

    text: str = ""


class Question(SchemaOrgNode):
    SCHEMA_TYPE: ClassVar[str] = "Question"

    name: str = ""
    accepted_answer: Answer | None = None

    def ensure_defaults(self) -> None:
        super().ensure_defaults()
        if self.accepted_answer is not None:
            self.accepted_answer.ensure_defaults()


class FAQPage(SchemaOrgEntity):
    """Schema.org FAQPage."""

    SCHEMA_TYPE: ClassVar[str] = "FAQPage"

    main_entity: list[Question] = Field(default_factory=list)

    def ensure_defaults(self) -> None:
        super().ensure_defaults()
        for question in self.main_entity:
            question.ensure_defaults()


def new_answer(text: str) -> Answer:
    answer = Answer(text=text)
    answer.ensure_defaults()
    return answer


def new_question(name: str, answer: Answer | None = None) -> Question:
    question = Question(name=name, accepted_answer=answer)
    question.ensure_defaults()
    return question


def new_faq_page(questions: list[Question] | None = None) -> FAQPage:
    """Create a defaulted FAQPage from a list of questions."""
    faq_page = FAQPage(main_entity=questions or [])
    faq_page.ensure_defaults()
    return faq_page
