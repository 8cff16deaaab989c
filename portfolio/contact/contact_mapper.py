from portfolio.dto.contact_form_dto import ContactFormDto
from portfolio.entity.contact_form_entity import ContactFormEntity


class ContactMapper:
    def map_to_contact_form_dtos(
        self, entities: list[ContactFormEntity]
    ) -> list[ContactFormDto]:
        return [ContactFormDto.model_validate(e) for e in entities]

    def map_to_contact_form_dto(self, entity: ContactFormEntity) -> ContactFormDto:
        return ContactFormDto.model_validate(entity)
