"""
Plan classifiers.

Keyword tables and derived labels for the budget planning reference data:
domains, rubrics, items, item statuses, budget types, financial operations
and budget modifications.
"""

from __future__ import annotations
from datetime import date
from typing import Optional

from domain.shared.classification import KeywordCategory, KeywordClassifier
from domain.shared.value_objects import Priority


# =============================================================================
# DOMAIN
# =============================================================================

DOMAIN_CLASSIFIER = KeywordClassifier(
    [
        KeywordCategory('technical', 'TECHNICAL_DOMAIN', (
            'technique', 'technical', 'technologie', 'technology',
            'ingénierie', 'engineering', 'تقني', 'تكنولوجيا',
        )),
        KeywordCategory('administrative', 'ADMINISTRATIVE_DOMAIN', (
            'administratif', 'administrative', 'administration', 'gestion',
            'management', 'إداري', 'إدارة',
        )),
        KeywordCategory('operational', 'OPERATIONAL_DOMAIN', (
            'opérationnel', 'operational', 'opération', 'operation',
            'mission', 'تشغيلي', 'عملياتي',
        )),
        KeywordCategory('strategic', 'STRATEGIC_DOMAIN', (
            'stratégique', 'strategic', 'stratégie', 'strategy',
            'planification', 'planning', 'استراتيجي', 'تخطيط',
        )),
        KeywordCategory('financial', 'FINANCIAL_DOMAIN', (
            'financier', 'financial', 'finance', 'budget',
            'économique', 'economic', 'مالي', 'اقتصادي',
        )),
        KeywordCategory('hr', 'HR_DOMAIN', (
            'ressources humaines', 'human resources', 'personnel', 'rh',
            'موارد بشرية', 'أفراد',
        )),
        KeywordCategory('security', 'SECURITY_DOMAIN', (
            'sécurité', 'security', 'défense', 'defense', 'protection',
            'أمن', 'دفاع',
        )),
        KeywordCategory('logistics', 'LOGISTICS_DOMAIN', (
            'logistique', 'logistics', 'approvisionnement', 'supply',
            'transport', 'لوجستيات', 'إمداد',
        )),
        KeywordCategory('training', 'TRAINING_DOMAIN', (
            'formation', 'training', 'éducation', 'education',
            'apprentissage', 'learning', 'تدريب', 'تعليم',
        )),
    ],
    default='GENERAL_DOMAIN',
)

DOMAIN_PRIORITIES = {
    'SECURITY_DOMAIN': Priority.CRITICAL,
    'STRATEGIC_DOMAIN': Priority.CRITICAL,
    'OPERATIONAL_DOMAIN': Priority.HIGH,
    'TECHNICAL_DOMAIN': Priority.HIGH,
    'FINANCIAL_DOMAIN': Priority.MEDIUM,
    'ADMINISTRATIVE_DOMAIN': Priority.MEDIUM,
    'HR_DOMAIN': Priority.NORMAL,
    'LOGISTICS_DOMAIN': Priority.NORMAL,
    'TRAINING_DOMAIN': Priority.LOW,
}

DOMAIN_SCOPES = {
    'STRATEGIC_DOMAIN': 'ORGANIZATIONAL_SCOPE',
    'OPERATIONAL_DOMAIN': 'DEPARTMENTAL_SCOPE',
    'SECURITY_DOMAIN': 'DEPARTMENTAL_SCOPE',
    'TECHNICAL_DOMAIN': 'FUNCTIONAL_SCOPE',
    'FINANCIAL_DOMAIN': 'FUNCTIONAL_SCOPE',
    'ADMINISTRATIVE_DOMAIN': 'SUPPORT_SCOPE',
    'HR_DOMAIN': 'SUPPORT_SCOPE',
    'LOGISTICS_DOMAIN': 'SERVICE_SCOPE',
    'TRAINING_DOMAIN': 'SERVICE_SCOPE',
}

REPORTING_FREQUENCIES = {
    Priority.CRITICAL: 'DAILY_REPORTING',
    Priority.HIGH: 'WEEKLY_REPORTING',
    Priority.MEDIUM: 'MONTHLY_REPORTING',
    Priority.NORMAL: 'QUARTERLY_REPORTING',
    Priority.LOW: 'ANNUAL_REPORTING',
}


def domain_priority(category: str) -> Priority:
    return DOMAIN_PRIORITIES.get(category, Priority.NORMAL)


def domain_scope(category: str) -> str:
    return DOMAIN_SCOPES.get(category, 'GENERAL_SCOPE')


def domain_governance_model(category: str) -> str:
    priority = domain_priority(category)
    if priority is Priority.CRITICAL:
        return 'EXECUTIVE_GOVERNANCE'
    if priority is Priority.HIGH:
        return 'SENIOR_GOVERNANCE'
    if category == 'STRATEGIC_DOMAIN':
        return 'STRATEGIC_GOVERNANCE'
    if category == 'OPERATIONAL_DOMAIN':
        return 'OPERATIONAL_GOVERNANCE'
    return 'STANDARD_GOVERNANCE'


def domain_reporting_frequency(category: str) -> str:
    return REPORTING_FREQUENCIES[domain_priority(category)]


def domain_categories_with_priority(priority: Priority) -> list[str]:
    return [code for code, value in DOMAIN_PRIORITIES.items() if value is priority]


# =============================================================================
# RUBRIC
# =============================================================================

RUBRIC_CLASSIFIER = KeywordClassifier(
    [
        KeywordCategory('requirements', 'REQUIREMENTS_RUBRIC', (
            'exigence', 'requirement', 'spécification', 'specification',
            'besoin', 'need', 'متطلب', 'مواصفة',
        )),
        KeywordCategory('quality', 'QUALITY_RUBRIC', (
            'qualité', 'quality', 'norme', 'standard', 'conformité',
            'compliance', 'جودة', 'معيار',
        )),
        KeywordCategory('performance', 'PERFORMANCE_RUBRIC', (
            'performance', 'efficacité', 'efficiency', 'rendement',
            'productivité', 'productivity', 'أداء', 'كفاءة',
        )),
        KeywordCategory('security', 'SECURITY_RUBRIC', (
            'sécurité', 'security', 'protection', 'confidentialité',
            'confidentiality', 'أمن', 'حماية',
        )),
        KeywordCategory('compliance', 'COMPLIANCE_RUBRIC', (
            'conformité', 'compliance', 'réglementation', 'regulation',
            'audit', 'contrôle', 'امتثال', 'مراجعة',
        )),
        KeywordCategory('technical', 'TECHNICAL_RUBRIC', (
            'technique', 'technical', 'technologie', 'technology',
            'système', 'system', 'تقني', 'نظام',
        )),
        KeywordCategory('operational', 'OPERATIONAL_RUBRIC', (
            'opérationnel', 'operational', 'processus', 'process',
            'procédure', 'procedure', 'تشغيلي', 'عملية',
        )),
        KeywordCategory('training', 'TRAINING_RUBRIC', (
            'formation', 'training', 'compétence', 'competency',
            'apprentissage', 'learning', 'تدريب', 'مهارة',
        )),
        KeywordCategory('documentation', 'DOCUMENTATION_RUBRIC', (
            'documentation', 'document', 'manuel', 'manual', 'guide',
            'instruction', 'توثيق', 'دليل',
        )),
    ],
    default='GENERAL_RUBRIC',
)

RUBRIC_PRIORITIES = {
    'SECURITY_RUBRIC': Priority.CRITICAL,
    'COMPLIANCE_RUBRIC': Priority.CRITICAL,
    'REQUIREMENTS_RUBRIC': Priority.HIGH,
    'QUALITY_RUBRIC': Priority.HIGH,
    'PERFORMANCE_RUBRIC': Priority.MEDIUM,
    'TECHNICAL_RUBRIC': Priority.MEDIUM,
    'OPERATIONAL_RUBRIC': Priority.NORMAL,
    'TRAINING_RUBRIC': Priority.NORMAL,
    'DOCUMENTATION_RUBRIC': Priority.LOW,
}


def rubric_priority(category: str) -> Priority:
    return RUBRIC_PRIORITIES.get(category, Priority.NORMAL)


# =============================================================================
# ITEM
# =============================================================================

ITEM_CLASSIFIER = KeywordClassifier(
    [
        KeywordCategory('equipment', 'EQUIPMENT_ITEM', (
            'équipement', 'equipment', 'matériel', 'material', 'outil',
            'tool', 'معدات', 'أدوات',
        )),
        KeywordCategory('resource', 'RESOURCE_ITEM', (
            'ressource', 'resource', 'personnel', 'staff', 'humain',
            'human', 'مورد', 'موظف',
        )),
        KeywordCategory('service', 'SERVICE_ITEM', (
            'service', 'prestation', 'assistance', 'support', 'maintenance',
            'خدمة', 'دعم',
        )),
        KeywordCategory('infrastructure', 'INFRASTRUCTURE_ITEM', (
            'infrastructure', 'installation', 'facility', 'bâtiment',
            'building', 'بنية تحتية', 'منشأة',
        )),
        KeywordCategory('technology', 'TECHNOLOGY_ITEM', (
            'technologie', 'technology', 'logiciel', 'software', 'système',
            'system', 'تكنولوجيا', 'برمجيات',
        )),
        KeywordCategory('consumable', 'CONSUMABLE_ITEM', (
            'consommable', 'consumable', 'fourniture', 'supply', 'carburant',
            'fuel', 'مستهلكات', 'وقود',
        )),
        KeywordCategory('training', 'TRAINING_ITEM', (
            'formation', 'training', 'cours', 'course', 'apprentissage',
            'learning', 'تدريب', 'دورة',
        )),
        KeywordCategory('document', 'DOCUMENT_ITEM', (
            'document', 'manuel', 'manual', 'guide', 'procédure',
            'procedure', 'وثيقة', 'دليل',
        )),
        KeywordCategory('vehicle', 'VEHICLE_ITEM', (
            'véhicule', 'vehicle', 'transport', 'automobile', 'camion',
            'truck', 'مركبة', 'سيارة',
        )),
    ],
    default='GENERAL_ITEM',
)

ITEM_LIFECYCLES = {
    'EQUIPMENT_ITEM': 'ASSET_LIFECYCLE',
    'VEHICLE_ITEM': 'ASSET_LIFECYCLE',
    'INFRASTRUCTURE_ITEM': 'ASSET_LIFECYCLE',
    'TECHNOLOGY_ITEM': 'TECHNOLOGY_LIFECYCLE',
    'RESOURCE_ITEM': 'RESOURCE_LIFECYCLE',
    'SERVICE_ITEM': 'SERVICE_LIFECYCLE',
    'TRAINING_ITEM': 'TRAINING_LIFECYCLE',
    'CONSUMABLE_ITEM': 'CONSUMPTION_LIFECYCLE',
    'DOCUMENT_ITEM': 'DOCUMENT_LIFECYCLE',
}


ITEM_PRIORITIES = {
    'EQUIPMENT_ITEM': Priority.HIGH,
    'INFRASTRUCTURE_ITEM': Priority.HIGH,
    'RESOURCE_ITEM': Priority.HIGH,
    'TECHNOLOGY_ITEM': Priority.HIGH,
    'SERVICE_ITEM': Priority.MEDIUM,
    'VEHICLE_ITEM': Priority.MEDIUM,
    'TRAINING_ITEM': Priority.NORMAL,
    'DOCUMENT_ITEM': Priority.NORMAL,
    'CONSUMABLE_ITEM': Priority.LOW,
}


def item_priority(category: str) -> Priority:
    return ITEM_PRIORITIES.get(category, Priority.NORMAL)


def item_lifecycle(category: str) -> str:
    return ITEM_LIFECYCLES.get(category, 'GENERAL_LIFECYCLE')


# =============================================================================
# ITEM STATUS
# =============================================================================

ITEM_STATUS_CLASSIFIER = KeywordClassifier(
    [
        KeywordCategory('active', 'ACTIVE_STATUS', (
            'actif', 'active', 'disponible', 'available', 'en stock',
            'in stock', 'متاح', 'نشط',
        )),
        KeywordCategory('pending', 'PENDING_STATUS', (
            'en cours', 'pending', 'attente', 'waiting', 'traitement',
            'processing', 'قيد المعالجة', 'في الانتظار',
        )),
        KeywordCategory('reserved', 'RESERVED_STATUS', (
            'réservé', 'reserved', 'alloué', 'allocated', 'assigné',
            'assigned', 'محجوز', 'مخصص',
        )),
        KeywordCategory('maintenance', 'MAINTENANCE_STATUS', (
            'maintenance', 'réparation', 'repair', 'entretien', 'révision',
            'revision', 'صيانة', 'إصلاح',
        )),
        KeywordCategory('damaged', 'DAMAGED_STATUS', (
            'endommagé', 'damaged', 'défectueux', 'defective', 'cassé',
            'broken', 'تالف', 'معطل',
        )),
        KeywordCategory('obsolete', 'OBSOLETE_STATUS', (
            'obsolète', 'obsolete', 'retiré', 'retired', 'périmé',
            'expired', 'منتهي الصلاحية', 'مستبعد',
        )),
        KeywordCategory('disposed', 'DISPOSED_STATUS', (
            'éliminé', 'disposed', 'mis au rebut', 'scrapped', 'détruit',
            'destroyed', 'مُتخلص منه', 'مدمر',
        )),
        KeywordCategory('lost', 'LOST_STATUS', (
            'perdu', 'lost', 'manquant', 'missing', 'introuvable',
            'not found', 'مفقود', 'غائب',
        )),
        KeywordCategory('procurement', 'PROCUREMENT_STATUS', (
            'commandé', 'ordered', 'en commande', 'on order',
            'approvisionnement', 'procurement', 'مطلوب', 'قيد الطلب',
        )),
    ],
    default='GENERAL_STATUS',
)

ITEM_STATUS_PRIORITIES = {
    'DAMAGED_STATUS': Priority.CRITICAL,
    'LOST_STATUS': Priority.CRITICAL,
    'MAINTENANCE_STATUS': Priority.HIGH,
    'PENDING_STATUS': Priority.HIGH,
    'RESERVED_STATUS': Priority.MEDIUM,
    'PROCUREMENT_STATUS': Priority.MEDIUM,
    'ACTIVE_STATUS': Priority.NORMAL,
    'OBSOLETE_STATUS': Priority.LOW,
    'DISPOSED_STATUS': Priority.LOW,
}

ITEM_STATUS_IMPACTS = {
    'ACTIVE_STATUS': 'OPERATIONAL_READY',
    'RESERVED_STATUS': 'TEMPORARILY_UNAVAILABLE',
    'MAINTENANCE_STATUS': 'UNDER_MAINTENANCE',
    'DAMAGED_STATUS': 'NON_OPERATIONAL',
    'LOST_STATUS': 'MISSING_FROM_INVENTORY',
    'OBSOLETE_STATUS': 'END_OF_LIFE',
    'DISPOSED_STATUS': 'REMOVED_FROM_SERVICE',
    'PENDING_STATUS': 'STATUS_PENDING',
    'PROCUREMENT_STATUS': 'AWAITING_DELIVERY',
}

ITEM_STATUS_LIFECYCLE_STAGES = {
    'PROCUREMENT_STATUS': 'PRE_SERVICE',
    'PENDING_STATUS': 'IN_SERVICE',
    'ACTIVE_STATUS': 'IN_SERVICE',
    'RESERVED_STATUS': 'IN_SERVICE',
    'MAINTENANCE_STATUS': 'SERVICE_INTERRUPTION',
    'DAMAGED_STATUS': 'SERVICE_INTERRUPTION',
    'OBSOLETE_STATUS': 'END_OF_SERVICE',
    'DISPOSED_STATUS': 'END_OF_SERVICE',
    'LOST_STATUS': 'END_OF_SERVICE',
}

ACTION_REQUIRED_STATUSES = ('DAMAGED_STATUS', 'LOST_STATUS', 'MAINTENANCE_STATUS', 'PENDING_STATUS')

OPERATIONAL_STATUSES = ('ACTIVE_STATUS',)


def item_status_priority(category: str) -> Priority:
    return ITEM_STATUS_PRIORITIES.get(category, Priority.NORMAL)


def item_status_impact(category: str) -> str:
    return ITEM_STATUS_IMPACTS.get(category, 'UNKNOWN_IMPACT')


def item_status_lifecycle_stage(category: str) -> str:
    return ITEM_STATUS_LIFECYCLE_STAGES.get(category, 'UNKNOWN_STAGE')


def item_status_allows_usage(category: str) -> bool:
    return category in OPERATIONAL_STATUSES


def item_status_requires_action(category: str) -> bool:
    return category in ACTION_REQUIRED_STATUSES


def item_status_categories_with_priority(priority: Priority) -> list[str]:
    return [code for code, value in ITEM_STATUS_PRIORITIES.items() if value is priority]


# =============================================================================
# BUDGET TYPE
# =============================================================================

BUDGET_TYPE_CLASSIFIER = KeywordClassifier(
    [
        KeywordCategory('investment', 'INVESTMENT_BUDGET', (
            'investissement', 'investment', 'capital', 'équipement',
            'equipment', 'استثمار', 'رأسمالي',
        )),
        KeywordCategory('operating', 'OPERATING_BUDGET', (
            'fonctionnement', 'operating', 'operational', 'exploitation',
            'تشغيلي', 'تشغيل',
        )),
        KeywordCategory('personnel', 'PERSONNEL_BUDGET', (
            'personnel', 'salaire', 'salary', 'wages', 'رواتب', 'أجور',
        )),
        KeywordCategory('maintenance', 'MAINTENANCE_BUDGET', (
            'maintenance', 'entretien', 'réparation', 'repair', 'صيانة', 'إصلاح',
        )),
        KeywordCategory('research-development', 'RESEARCH_DEVELOPMENT_BUDGET', (
            'recherche', 'research', 'développement', 'development',
            'innovation', 'بحث', 'تطوير',
        )),
        KeywordCategory('defense', 'DEFENSE_BUDGET', (
            'défense', 'defense', 'militaire', 'military', 'sécurité',
            'security', 'دفاع', 'عسكري',
        )),
        KeywordCategory('training', 'TRAINING_BUDGET', (
            'formation', 'training', 'éducation', 'education', 'تدريب', 'تعليم',
        )),
        KeywordCategory('emergency', 'EMERGENCY_BUDGET', (
            'urgence', 'emergency', 'contingence', 'contingency', 'طوارئ', 'احتياطي',
        )),
    ],
    default='GENERAL_BUDGET',
)

BUDGET_TYPE_PRIORITIES = {
    'DEFENSE_BUDGET': Priority.CRITICAL,
    'EMERGENCY_BUDGET': Priority.CRITICAL,
    'PERSONNEL_BUDGET': Priority.HIGH,
    'OPERATING_BUDGET': Priority.HIGH,
    'INVESTMENT_BUDGET': Priority.MEDIUM,
    'RESEARCH_DEVELOPMENT_BUDGET': Priority.MEDIUM,
    'MAINTENANCE_BUDGET': Priority.NORMAL,
    'TRAINING_BUDGET': Priority.NORMAL,
}


def budget_type_priority(category: str) -> Priority:
    return BUDGET_TYPE_PRIORITIES.get(category, Priority.LOW)


def budget_type_approval_level(category: str) -> str:
    priority = budget_type_priority(category)
    if priority in (Priority.CRITICAL, Priority.HIGH):
        return 'DIRECTORIAL_APPROVAL'
    if priority is Priority.MEDIUM:
        return 'DEPARTMENTAL_APPROVAL'
    return 'STANDARD_APPROVAL'


# =============================================================================
# FINANCIAL OPERATION
# =============================================================================

FINANCIAL_OPERATION_CLASSIFIER = KeywordClassifier(
    [
        KeywordCategory('budget-allocation', 'BUDGET_ALLOCATION', (
            'allocation', 'budget', 'affectation', 'dotation', 'تخصيص', 'ميزانية',
        )),
        KeywordCategory('expenditure', 'EXPENDITURE_OPERATION', (
            'expenditure', 'expense', 'dépense', 'coût', 'إنفاق', 'مصروف',
        )),
        KeywordCategory('revenue', 'REVENUE_OPERATION', (
            'revenue', 'income', 'recette', 'revenu', 'إيراد', 'دخل',
        )),
        KeywordCategory('transfer', 'TRANSFER_OPERATION', (
            'transfer', 'virement', 'transfert', 'réaffectation', 'تحويل', 'نقل',
        )),
        KeywordCategory('investment', 'INVESTMENT_OPERATION', (
            'investment', 'capital', 'investissement', 'équipement', 'استثمار', 'رأسمال',
        )),
        KeywordCategory('procurement', 'PROCUREMENT_OPERATION', (
            'procurement', 'purchase', 'acquisition', 'achat', 'مشتريات', 'شراء',
        )),
        KeywordCategory('payment', 'PAYMENT_OPERATION', (
            'payment', 'paiement', 'versement', 'règlement', 'دفع', 'سداد',
        )),
        KeywordCategory('adjustment', 'ADJUSTMENT_OPERATION', (
            'adjustment', 'correction', 'ajustement', 'rectification', 'تعديل', 'تصحيح',
        )),
    ],
    default='GENERAL_OPERATION',
)

FINANCIAL_OPERATION_IMPACTS = {
    'BUDGET_ALLOCATION': 'BUDGET_ESTABLISHMENT',
    'EXPENDITURE_OPERATION': 'CASH_OUTFLOW',
    'REVENUE_OPERATION': 'CASH_INFLOW',
    'TRANSFER_OPERATION': 'BUDGET_REALLOCATION',
    'INVESTMENT_OPERATION': 'CAPITAL_EXPENDITURE',
    'PROCUREMENT_OPERATION': 'OPERATIONAL_EXPENDITURE',
    'PAYMENT_OPERATION': 'SETTLEMENT_TRANSACTION',
    'ADJUSTMENT_OPERATION': 'ACCOUNTING_CORRECTION',
}


def financial_operation_impact(category: str) -> str:
    return FINANCIAL_OPERATION_IMPACTS.get(category, 'NEUTRAL_IMPACT')


# =============================================================================
# BUDGET MODIFICATION
# =============================================================================

PENDING_APPROVAL = 'PENDING_APPROVAL'
SCHEDULED_FOR_APPROVAL = 'SCHEDULED_FOR_APPROVAL'
APPROVED = 'APPROVED'

MODIFICATION_STATUS_SLUGS = {
    'pending': PENDING_APPROVAL,
    'approved': APPROVED,
    'scheduled': SCHEDULED_FOR_APPROVAL,
}

BUDGET_MODIFICATION_CLASSIFIER = KeywordClassifier(
    [
        KeywordCategory('increase', 'BUDGET_INCREASE', (
            'augmentation', 'increase', 'ajout', 'addition', 'زيادة', 'إضافة',
        )),
        KeywordCategory('decrease', 'BUDGET_DECREASE', (
            'réduction', 'reduction', 'diminution', 'decrease', 'تقليل', 'خفض',
        )),
        KeywordCategory('reallocation', 'BUDGET_REALLOCATION', (
            'réallocation', 'reallocation', 'transfert', 'transfer', 'virement',
            'إعادة تخصيص',
        )),
        KeywordCategory('emergency', 'EMERGENCY_MODIFICATION', (
            'urgence', 'emergency', 'urgent', 'critique', 'critical', 'طوارئ',
        )),
        KeywordCategory('correction', 'CORRECTION_MODIFICATION', (
            'correction', 'rectification', 'ajustement', 'adjustment', 'تصحيح', 'تعديل',
        )),
        KeywordCategory('revision', 'REVISION_MODIFICATION', (
            'révision', 'revision', 'mise à jour', 'update', 'مراجعة', 'تحديث',
        )),
    ],
    default='STANDARD_MODIFICATION',
)

MODIFICATION_PRIORITIES = {
    'EMERGENCY_MODIFICATION': Priority.CRITICAL,
    'BUDGET_INCREASE': Priority.HIGH,
    'BUDGET_DECREASE': Priority.HIGH,
    'BUDGET_REALLOCATION': Priority.MEDIUM,
    'CORRECTION_MODIFICATION': Priority.MEDIUM,
    'REVISION_MODIFICATION': Priority.NORMAL,
    'STANDARD_MODIFICATION': Priority.NORMAL,
}


def modification_status(approval_date: Optional[date], today: date) -> str:
    if approval_date is None:
        return PENDING_APPROVAL
    if approval_date > today:
        return SCHEDULED_FOR_APPROVAL
    return APPROVED


def modification_type(subject: Optional[str]) -> str:
    if not subject or not subject.strip():
        return 'GENERAL_MODIFICATION'
    return BUDGET_MODIFICATION_CLASSIFIER.classify(subject)


def modification_priority(modification_type_code: str) -> Priority:
    return MODIFICATION_PRIORITIES.get(modification_type_code, Priority.LOW)


def modification_urgency(modification_type_code: str, status: str) -> str:
    priority = modification_priority(modification_type_code)
    if priority is Priority.CRITICAL:
        return 'IMMEDIATE_ACTION'
    if priority is Priority.HIGH and status == PENDING_APPROVAL:
        return 'URGENT_ACTION'
    if priority is Priority.MEDIUM:
        return 'TIMELY_ACTION'
    return 'STANDARD_ACTION'


def modification_display_text(subject: Optional[str], description: Optional[str], pk) -> str:
    if subject and subject.strip():
        return subject
    if description and description.strip():
        return description[:47] + '...' if len(description) > 50 else description
    return f"Budget Modification #{pk if pk is not None else 'N/A'}"
