from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    # Wire format is camelCase (createdAt, newPassword); snake_case is accepted on input too
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)
