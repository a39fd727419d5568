from pydantic import BaseModel, Field


class ProjectRules(BaseModel):
    slug: str
    rules_version: str


class OpsRules(BaseModel):
    required_env: list[str]


class DataStoreRules(BaseModel):
    timeout_seconds: float = Field(gt=0)
    rest_path: str = "/rest/v1"


class FetchRules(BaseModel):
    timeout_seconds: float = Field(gt=0)
    max_image_bytes: int = Field(gt=0)


class SharedCacheRule(BaseModel):
    s_maxage_seconds: int = Field(ge=0)
    stale_while_revalidate_seconds: int = Field(ge=0)


class CacheRules(BaseModel):
    bot_html: SharedCacheRule
    preview_image: SharedCacheRule
    shell_cache_control: str


class ShellRules(BaseModel):
    path: str = "/index.html"
    ttl_seconds: float | None = None


class Rules(BaseModel):
    project: ProjectRules
    ops: OpsRules
    data_store: DataStoreRules
    fetch: FetchRules
    cache: CacheRules
    shell: ShellRules
