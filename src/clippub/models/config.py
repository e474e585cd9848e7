from pydantic import BaseModel, ConfigDict, Field


class Config(BaseModel):
    """R2 bucket settings. Serialized with the camelCase aliases."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    bucket_name: str = Field(alias="r2BucketName", min_length=1)
    account_id: str = Field(alias="r2AccountId", min_length=1)
    access_key_id: str = Field(alias="cfAccessKeyId", min_length=1)
    secret_access_key: str = Field(alias="cfSecretAccessKey", min_length=1)
    public_domain_url: str = Field(alias="publicDomainUrl", min_length=1)

    @property
    def endpoint_url(self) -> str:
        return f"https://{self.account_id}.r2.cloudflarestorage.com"

    def public_url_for(self, key: str) -> str:
        base = self.public_domain_url
        if not base.endswith("/"):
            base = f"{base}/"
        return f"{base}{key}"
