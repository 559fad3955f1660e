import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from models.company_record import COMPETITIVE_POSITIONS, FUNDING_STAGES, CompanyRecord
from services.domain_utils import normalize_website
from utils.number_parsing import parse_amount, parse_int, parse_percent


REQUIRED_FIELDS = ["name", "industry", "sector"]

_AMOUNT_FIELDS = ["total_funding", "revenue"]
_INT_FIELDS = ["year_founded", "headcount", "acquisition_suitability", "investment_potential", "patents"]
_PERCENT_FIELDS = ["growth_rate", "employee_growth_rate"]
_LIST_FIELDS = ["key_technologies", "technical_differentiators"]


class DataValidator:
    def __init__(self):
        self.validation_stats = {
            'total_companies': 0,
            'valid_companies': 0,
            'invalid_companies': 0,
            'validation_errors': []
        }

    def validate_company_required(self, company: Dict[str, Any]) -> List[str]:
        """Check that name, industry and sector are present and non-blank."""
        errors = []
        for field in REQUIRED_FIELDS:
            value = company.get(field)
            if not isinstance(value, str) or not value.strip():
                errors.append(f"Missing required field: {field}")
        return errors

    def validate_optional_fields(self, company: Dict[str, Any]) -> List[str]:
        """Soft checks on optional fields; these never reject a company."""
        warnings = []

        stage = company.get('funding_stage')
        if stage and stage not in FUNDING_STAGES:
            warnings.append(f"Unrecognised funding stage: {stage}")

        position = company.get('competitive_position')
        if position and position not in COMPETITIVE_POSITIONS:
            warnings.append(f"Non-standard competitive position (excluded from landscape): {position}")

        website = company.get('website')
        if website and not str(website).startswith(('http://', 'https://')):
            warnings.append("Website should start with http(s)://")

        description = company.get('description')
        if description and len(str(description)) > 2000:
            warnings.append(f"Description field too long: {len(str(description))} characters")

        return warnings

    def validate_company_data(self, company: Dict[str, Any]) -> Dict[str, Any]:
        """Validate a single raw company and return validation results."""
        validation_result = {
            'is_valid': True,
            'errors': [],
            'warnings': [],
            'company': company
        }

        validation_result['errors'].extend(self.validate_company_required(company))
        validation_result['warnings'].extend(self.validate_optional_fields(company))

        # Model-level invariants (score ranges, non-negative amounts, plausible year)
        if not validation_result['errors']:
            try:
                CompanyRecord.model_validate(company)
            except ValidationError as exc:
                validation_result['errors'].extend(
                    f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
                )

        validation_result['is_valid'] = len(validation_result['errors']) == 0

        self.validation_stats['total_companies'] += 1
        if validation_result['is_valid']:
            self.validation_stats['valid_companies'] += 1
        else:
            self.validation_stats['invalid_companies'] += 1
            self.validation_stats['validation_errors'].extend(validation_result['errors'])

        return validation_result

    def validate_all_companies(self, companies: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Validate all companies and return only valid ones."""
        valid = []

        logging.info(f"Starting validation of {len(companies)} companies")

        for i, company in enumerate(companies):
            validation_result = self.validate_company_data(company)

            if validation_result['is_valid']:
                valid.append(company)
                if validation_result['warnings']:
                    logging.warning(f"Company {i+1} has warnings: {validation_result['warnings']}")
            else:
                logging.error(f"Company {i+1} validation failed: {validation_result['errors']}")

        logging.info(f"Validation completed. Valid: {len(valid)}, "
                     f"Invalid: {len(companies) - len(valid)}")

        return valid

    def clean_company_data(self, company: Dict[str, Any]) -> Dict[str, Any]:
        """Trim strings and coerce form-style input ('12M', '180%', 'A, B') to typed values."""
        cleaned = dict(company)

        for k, v in list(cleaned.items()):
            if isinstance(v, str):
                cleaned[k] = v.strip()

        for k in _AMOUNT_FIELDS:
            if k in cleaned:
                cleaned[k] = parse_amount(cleaned[k])
        for k in _INT_FIELDS:
            if k in cleaned:
                cleaned[k] = parse_int(cleaned[k])
        for k in _PERCENT_FIELDS:
            if k in cleaned:
                cleaned[k] = parse_percent(cleaned[k])
        for k in _LIST_FIELDS:
            if isinstance(cleaned.get(k), str):
                items = [item.strip() for item in cleaned[k].split(',')]
                cleaned[k] = [item for item in items if item] or None

        if cleaned.get('website'):
            cleaned['website'] = normalize_website(cleaned['website'])

        return cleaned

    def find_unparsable_values(self, raw: Dict[str, Any], cleaned: Dict[str, Any]) -> List[str]:
        """Errors for fields given a non-blank value that cleaning turned into None."""
        errors = []
        for field, value in raw.items():
            if value is None or (isinstance(value, str) and not value.strip()):
                continue
            if cleaned.get(field) is None:
                errors.append(f"Unparsable value for {field}: {value!r}")
        return errors

    def remove_company_duplicates(self, companies: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Drop repeated companies by case-insensitive name, keeping the first."""
        seen = set()
        unique: List[Dict[str, Any]] = []
        for c in companies:
            key = (c.get('name') or '').strip().lower()
            if key and key not in seen:
                seen.add(key)
                unique.append(c)

        duplicates_removed = len(companies) - len(unique)
        if duplicates_removed > 0:
            logging.info(f"Removed {duplicates_removed} duplicate companies")

        return unique

    def to_record(self, company: Dict[str, Any]) -> Optional[CompanyRecord]:
        """Build a CompanyRecord from an already validated dict."""
        try:
            return CompanyRecord.model_validate(company)
        except ValidationError as exc:
            logging.error(f"Company {company.get('name')!r} rejected: {exc.error_count()} errors")
            return None

    def get_validation_stats(self) -> Dict:
        """Return validation statistics."""
        return self.validation_stats.copy()
