# app/domains/ven/crud.py

"""
'ven' 도메인 (공급업체)과 관련된 CRUD 로직을 담당하는 모듈입니다.
"""

from app.core.crud_base import CRUDBase
from . import models as ven_models
from . import schemas as ven_schemas


class CRUDVendor(CRUDBase[ven_models.Vendor, ven_schemas.VendorCreate, ven_schemas.VendorUpdate]):
    label = "Vendor"
    name_field = "vendor_name"
    unique_fields = ("vendor_name",)

    def __init__(self):
        super().__init__(model=ven_models.Vendor)


vendor = CRUDVendor()
