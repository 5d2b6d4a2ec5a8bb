from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from create_strapi_app.schemas.option_specs import DATABASE_OPTIONS


class ProjectOptions(BaseModel):
    directory: Optional[str] = Field(alias="directory", default=None)
    run: bool = Field(alias="run", default=True)
    use_npm: bool = Field(alias="useNpm", default=False)
    debug: bool = Field(alias="debug", default=False)
    quickstart: bool = Field(alias="quickstart", default=False)
    skip_cloud: bool = Field(alias="skipCloud", default=False)
    dbclient: Optional[str] = Field(alias="dbclient", default=None)
    dbhost: Optional[str] = Field(alias="dbhost", default=None)
    dbport: Optional[str] = Field(alias="dbport", default=None)
    dbname: Optional[str] = Field(alias="dbname", default=None)
    dbusername: Optional[str] = Field(alias="dbusername", default=None)
    dbpassword: Optional[str] = Field(alias="dbpassword", default=None)
    dbssl: Optional[str] = Field(alias="dbssl", default=None)
    dbfile: Optional[str] = Field(alias="dbfile", default=None)
    dbforce: bool = Field(alias="dbforce", default=False)
    template: Optional[str] = Field(alias="template", default=None)
    typescript: bool = Field(alias="typescript", default=False)

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def database_flags(self) -> List[str]:
        """Имена переданных опций базы данных, в порядке объявления."""
        return [name for name in DATABASE_OPTIONS if getattr(self, name)]

    @property
    def has_database_options(self) -> bool:
        return bool(self.database_flags())

    def to_generator_options(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
