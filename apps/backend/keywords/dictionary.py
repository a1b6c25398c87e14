"""
Keyword dictionary for job description analysis.

Term lists are grouped by bucket; technical buckets are classified as
required/preferred by section, the rest map to a fixed category. Experience
and education requirements are matched with regex pattern sets instead of
literal terms.

The built-in lists can be extended with a YAML file:

    languages:
      - zig
    tools:
      - linear b
    education_patterns:
      - 'bootcamp'
"""
import re
import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Dict, Iterator, Optional, Pattern, Tuple

import yaml

from core.settings import get_settings

from .models import KeywordCategory

logger = logging.getLogger(__name__)

LANGUAGES = (
    'javascript', 'typescript', 'python', 'java', 'c++', 'c#', 'csharp',
    'go', 'golang', 'rust', 'ruby', 'php', 'swift', 'kotlin', 'scala',
    'r', 'matlab', 'perl', 'haskell', 'elixir', 'clojure', 'erlang',
    'objective-c', 'dart', 'lua', 'groovy', 'fortran', 'cobol',
)

FRONTEND = (
    'react', 'reactjs', 'react.js', 'vue', 'vuejs', 'vue.js', 'angular',
    'svelte', 'next.js', 'nextjs', 'nuxt', 'nuxtjs', 'gatsby',
    'html', 'html5', 'css', 'css3', 'sass', 'scss', 'less',
    'tailwind', 'tailwindcss', 'bootstrap', 'material-ui', 'mui',
    'styled-components', 'emotion', 'chakra',
    'webpack', 'vite', 'babel', 'rollup', 'parcel', 'esbuild',
    'redux', 'mobx', 'zustand', 'recoil', 'jotai',
    'jquery', 'backbone', 'ember',
)

BACKEND = (
    'node', 'nodejs', 'node.js', 'express', 'expressjs', 'fastify', 'koa', 'hapi',
    'django', 'flask', 'fastapi', 'tornado',
    'rails', 'ruby on rails', 'sinatra',
    'spring', 'spring boot', 'springboot', 'hibernate',
    '.net', 'dotnet', 'asp.net', 'aspnet', 'entity framework',
    'laravel', 'symfony', 'codeigniter',
    'gin', 'echo', 'fiber', 'beego',
    'actix', 'rocket', 'axum',
    'phoenix', 'ecto',
    'grpc', 'graphql', 'rest', 'restful', 'soap', 'websocket', 'websockets',
)

CLOUD = (
    'aws', 'amazon web services', 'ec2', 's3', 'lambda', 'rds', 'dynamodb',
    'cloudformation', 'cloudwatch', 'ecs', 'eks', 'fargate', 'sqs', 'sns',
    'gcp', 'google cloud', 'google cloud platform', 'bigquery', 'cloud functions',
    'azure', 'microsoft azure', 'azure devops',
    'docker', 'containerization', 'containers',
    'kubernetes', 'k8s', 'helm', 'istio', 'openshift',
    'terraform', 'pulumi',
    'ansible', 'puppet', 'chef', 'saltstack',
    'jenkins', 'circleci', 'travis', 'github actions', 'gitlab ci',
    'nginx', 'apache', 'caddy', 'haproxy',
    'linux', 'unix', 'ubuntu', 'centos', 'redhat', 'debian',
    'serverless', 'microservices', 'service mesh',
    'heroku', 'vercel', 'netlify', 'digitalocean', 'linode',
)

DATABASES = (
    'sql', 'nosql',
    'postgresql', 'postgres', 'mysql', 'mariadb', 'sqlite',
    'oracle', 'sql server', 'mssql',
    'mongodb', 'mongoose', 'dynamodb', 'couchdb', 'couchbase',
    'cassandra', 'scylladb',
    'redis', 'memcached', 'elasticache',
    'elasticsearch', 'opensearch', 'solr', 'lucene',
    'neo4j', 'neptune', 'graphdb', 'dgraph',
    'firebase', 'firestore', 'supabase',
    'prisma', 'sequelize', 'typeorm', 'knex',
)

DATA_ML = (
    'machine learning', 'ml', 'deep learning', 'dl',
    'artificial intelligence', 'ai', 'generative ai', 'llm', 'llms',
    'tensorflow', 'pytorch', 'keras', 'scikit-learn', 'sklearn',
    'pandas', 'numpy', 'scipy', 'matplotlib', 'seaborn',
    'jupyter', 'notebook', 'colab',
    'spark', 'pyspark', 'hadoop', 'hive', 'presto',
    'kafka', 'kinesis', 'flink', 'storm',
    'airflow', 'luigi', 'dagster', 'prefect',
    'dbt', 'fivetran', 'stitch',
    'data science', 'data engineering', 'data analyst', 'data analytics',
    'etl', 'elt', 'data pipeline', 'data warehouse', 'data lake',
    'tableau', 'looker', 'power bi', 'metabase', 'superset',
    'nlp', 'natural language processing', 'computer vision', 'cv',
    'hugging face', 'transformers', 'bert', 'gpt',
)

MOBILE = (
    'ios', 'android', 'mobile',
    'swift', 'swiftui', 'uikit', 'objective-c',
    'kotlin', 'java android',
    'react native', 'flutter', 'dart',
    'xamarin', 'ionic', 'cordova', 'capacitor',
    'expo', 'detox', 'appium',
)

TESTING = (
    'testing', 'unit testing', 'integration testing', 'e2e testing',
    'jest', 'mocha', 'chai', 'jasmine', 'karma',
    'pytest', 'unittest', 'nose',
    'cypress', 'playwright', 'selenium', 'puppeteer',
    'enzyme', 'react testing library', 'rtl',
    'tdd', 'bdd', 'test-driven development',
    'coverage', 'code coverage',
)

SECURITY = (
    'security', 'cybersecurity', 'infosec', 'appsec',
    'oauth', 'oauth2', 'jwt', 'saml', 'sso', 'openid',
    'encryption', 'ssl', 'tls', 'https',
    'penetration testing', 'pen testing', 'vulnerability',
    'owasp', 'xss', 'csrf', 'sql injection',
    'soc2', 'gdpr', 'hipaa', 'pci', 'compliance',
)

TOOLS = (
    'git', 'github', 'gitlab', 'bitbucket', 'svn',
    'jira', 'confluence', 'trello', 'asana', 'monday', 'notion', 'linear',
    'figma', 'sketch', 'adobe xd', 'invision', 'zeplin',
    'postman', 'insomnia', 'swagger', 'openapi',
    'datadog', 'splunk', 'new relic', 'grafana', 'prometheus',
    'sentry', 'bugsnag', 'rollbar',
    'slack', 'teams', 'zoom', 'discord',
    'vs code', 'vscode', 'intellij', 'webstorm', 'pycharm', 'vim', 'neovim',
)

SOFT_SKILLS = (
    'communication', 'written communication', 'verbal communication',
    'leadership', 'lead', 'leading', 'mentor', 'mentoring', 'mentorship',
    'teamwork', 'team player', 'collaboration', 'collaborative',
    'problem-solving', 'problem solving', 'analytical', 'critical thinking',
    'adaptability', 'flexible', 'flexibility', 'agile mindset',
    'initiative', 'proactive', 'self-starter', 'self-motivated', 'autonomous',
    'attention to detail', 'detail-oriented', 'meticulous',
    'organized', 'organization', 'time management', 'prioritization',
    'presentation', 'presenting', 'public speaking',
    'stakeholder management', 'cross-functional',
    'creative', 'creativity', 'innovative', 'innovation',
    'customer-focused', 'user-focused', 'empathy',
    'ownership', 'accountability', 'responsibility',
)

VALUES = (
    'fast-paced', 'fast paced', 'startup', 'start-up',
    'innovative', 'cutting-edge', 'cutting edge', 'bleeding edge',
    'mission-driven', 'mission driven', 'impact', 'impactful',
    'growth mindset', 'learning culture', 'continuous learning',
    'diversity', 'inclusive', 'inclusion', 'belonging', 'dei',
    'remote', 'remote-friendly', 'remote-first', 'hybrid', 'on-site', 'onsite',
    'work-life balance', 'work life balance', 'flexible hours', 'unlimited pto',
    'collaborative environment', 'team-oriented', 'supportive',
    'entrepreneurial', 'scrappy', 'resourceful',
    'transparent', 'transparency', 'open communication',
    'customer-obsessed', 'customer-centric', 'user-centric',
)

INDUSTRY = (
    'fintech', 'financial technology', 'banking', 'finance', 'trading',
    'healthcare', 'healthtech', 'medtech', 'biotech', 'pharma',
    'e-commerce', 'ecommerce', 'retail', 'marketplace',
    'edtech', 'education', 'learning',
    'saas', 'b2b', 'b2c', 'enterprise', 'platform',
    'gaming', 'esports', 'entertainment',
    'social media', 'social network', 'consumer',
    'logistics', 'supply chain', 'transportation',
    'real estate', 'proptech',
    'insurtech', 'insurance',
    'adtech', 'advertising', 'marketing tech', 'martech',
    'govtech', 'civic tech', 'government',
    'cleantech', 'climate', 'sustainability', 'green tech',
    'legaltech', 'legal',
    'hrtech', 'hr', 'human resources', 'recruiting',
)


def _compile(pattern: str) -> Pattern:
    # Bounded by non-word characters so "ms" never matches inside "teams"
    return re.compile(rf'(?<!\w)(?:{pattern})(?!\w)', re.IGNORECASE)


EXPERIENCE_PATTERNS = tuple(_compile(p) for p in (
    r'\d+\+?\s*(?:to\s*\d+\s*)?years?\s*(?:of\s+)?(?:experience|exp)',
    r'(?:minimum|at least|required:?)\s*\d+\+?\s*years?',
    r'senior|sr\.|lead|principal|staff|junior|jr\.|entry[- ]level|mid[- ]level',
    r'experience\s+(?:with|in|building|developing|working)',
))

EDUCATION_PATTERNS = tuple(_compile(p) for p in (
    r"b\.?s\.?|bachelor'?s?(?:\s+degree)?",
    r"m\.?s\.?|master'?s?(?:\s+degree)?",
    r'ph\.?d\.?|doctorate',
    r'computer science|software engineering|electrical engineering',
    r'mathematics|statistics|physics|data science',
    r'degree\s+in\s+[\w ]*\w',
    r'(?:bs|ms|ba|ma)[\s/](?:cs|ee|ce|se)',
    r'equivalent\s+(?:experience|work\s+experience)',
))

# Buckets whose terms are classified by section (required/preferred)
TECH_BUCKETS = (
    'languages', 'frontend', 'backend', 'cloud', 'databases',
    'data_ml', 'mobile', 'testing', 'security',
)

# Buckets with a fixed category, in scan order after the technical ones
FIXED_BUCKETS = (
    ('tools', KeywordCategory.TOOLS),
    ('soft_skills', KeywordCategory.SOFT_SKILL),
    ('values', KeywordCategory.VALUES),
    ('industry', KeywordCategory.INDUSTRY),
)

PATTERN_BUCKETS = ('experience_patterns', 'education_patterns')


@dataclass(frozen=True)
class KeywordDictionary:
    """Immutable set of term lists and requirement patterns."""
    languages: Tuple[str, ...] = LANGUAGES
    frontend: Tuple[str, ...] = FRONTEND
    backend: Tuple[str, ...] = BACKEND
    cloud: Tuple[str, ...] = CLOUD
    databases: Tuple[str, ...] = DATABASES
    data_ml: Tuple[str, ...] = DATA_ML
    mobile: Tuple[str, ...] = MOBILE
    testing: Tuple[str, ...] = TESTING
    security: Tuple[str, ...] = SECURITY
    tools: Tuple[str, ...] = TOOLS
    soft_skills: Tuple[str, ...] = SOFT_SKILLS
    values: Tuple[str, ...] = VALUES
    industry: Tuple[str, ...] = INDUSTRY
    experience_patterns: Tuple[Pattern, ...] = field(default=EXPERIENCE_PATTERNS)
    education_patterns: Tuple[Pattern, ...] = field(default=EDUCATION_PATTERNS)

    @property
    def tech_skills(self) -> Tuple[str, ...]:
        """All technical terms, in bucket order (duplicates kept)."""
        terms = ()
        for bucket in TECH_BUCKETS:
            terms += getattr(self, bucket)
        return terms

    def term_buckets(self) -> Iterator[Tuple[Optional[KeywordCategory], Tuple[str, ...]]]:
        """
        Yield (category, terms) in scan order.

        Technical skills come first with category None: their category
        depends on where in the description they appear.
        """
        yield None, self.tech_skills
        for bucket, category in FIXED_BUCKETS:
            yield category, getattr(self, bucket)

    def extend(self, additions: Dict[str, list]) -> 'KeywordDictionary':
        """Return a copy with extra terms/patterns appended to the named buckets."""
        changes = {}
        for bucket, items in additions.items():
            if items is not None and not isinstance(items, (list, tuple)):
                logger.warning(f"Keyword bucket '{bucket}' must be a list, got {type(items).__name__}; ignored")
                continue
            if bucket in PATTERN_BUCKETS:
                compiled = tuple(_compile(str(p)) for p in items or [])
                changes[bucket] = getattr(self, bucket) + compiled
            elif bucket in TECH_BUCKETS or bucket in dict(FIXED_BUCKETS):
                terms = tuple(str(t).strip().lower() for t in items or [] if str(t).strip())
                changes[bucket] = getattr(self, bucket) + terms
            else:
                logger.warning(f"Unknown keyword bucket '{bucket}' ignored")
        return replace(self, **changes)


DEFAULT_DICTIONARY = KeywordDictionary()

# Cache for the configured dictionary
_dictionary: Optional[KeywordDictionary] = None


def load_dictionary(path) -> KeywordDictionary:
    """
    Build a dictionary from the defaults plus the buckets in a YAML file.

    A missing or unreadable file leaves the defaults untouched.
    """
    config_path = Path(path)

    if not config_path.exists():
        logger.warning(f"Keyword dictionary file not found: {config_path}. Using defaults.")
        return DEFAULT_DICTIONARY

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            additions = yaml.safe_load(f) or {}
    except Exception as e:
        logger.error(f"Error loading keyword dictionary {config_path}: {e}")
        return DEFAULT_DICTIONARY

    if not isinstance(additions, dict):
        logger.error(f"Keyword dictionary {config_path} must be a mapping of bucket -> list")
        return DEFAULT_DICTIONARY

    try:
        dictionary = DEFAULT_DICTIONARY.extend(additions)
    except re.error as e:
        logger.error(f"Invalid pattern in keyword dictionary {config_path}: {e}")
        return DEFAULT_DICTIONARY

    logger.info(f"Loaded keyword dictionary extensions from {config_path}")
    return dictionary


def get_dictionary() -> KeywordDictionary:
    """Dictionary configured for this process (KEYWORD_DICTIONARY_PATH or defaults)."""
    global _dictionary
    if _dictionary is None:
        path = get_settings().keyword_dictionary_path
        _dictionary = load_dictionary(path) if path else DEFAULT_DICTIONARY
    return _dictionary


def reset_dictionary():
    """Forget the cached dictionary so settings are read again."""
    global _dictionary
    _dictionary = None
