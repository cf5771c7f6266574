"""
utils/constants.py

Purpose: Centralized static content

- All user-facing messages (welcome, contact, service details)
- Button ids and labels
- Company hotlines

(Prevents hardcoding across the codebase)
"""

# ============================================================
# CONTACT DETAILS
# ============================================================

SOFTWARE_HOTLINE = "077 069 1283"
DIGITAL_HOTLINE = "075 339 4278"
CONTACT_EMAIL = "novonexlk@gmail.com"

SOFTWARE_CONTACT_FOOTER = f"""📞 *Contact:* {SOFTWARE_HOTLINE}
📧 *Email:* {CONTACT_EMAIL}"""

DIGITAL_CONTACT_FOOTER = f"""📞 *Contact:* {DIGITAL_HOTLINE}
📧 *Email:* {CONTACT_EMAIL}"""

# ============================================================
# BUTTON IDS (also accepted as typed text)
# ============================================================

BUTTON_ID_SOFTWARE = "1"
BUTTON_ID_DIGITAL = "2"
BUTTON_ID_NEXT_PAGE = "next_page"
BUTTON_ID_PREV_PAGE = "prev_page"
BUTTON_ID_MAIN_MENU = "back_to_welcome"
BUTTON_ID_CONTACT = "contact_info"

SERVICE_ID_PREFIX = "service"

# Keywords that open a company menu when contained in free text
SOFTWARE_KEYWORD = "software"
DIGITAL_KEYWORD = "digital"

# ============================================================
# BUTTON LABELS
# ============================================================

BUTTON_SOFTWARE = "🚀 Software Solutions"
BUTTON_DIGITAL = "📱 Digital Works"
BUTTON_CONTACT_INFO = "📞 Contact Info"
BUTTON_CONTACT = "📞 Contact"
BUTTON_MORE_INFO = "📞 More Info"
BUTTON_MAIN_MENU = "🏠 Main Menu"
BUTTON_PREVIOUS = "⬅️ Previous"
BUTTON_NEXT = "Next ➡️"

# ============================================================
# WELCOME & CONTACT
# ============================================================

WELCOME_MESSAGE = """🤖 *Welcome to NovoNex!*

We provide comprehensive technology and digital solutions for your business.

*Please select a service category:*

1️⃣ *NovoNex Software Solutions*
   - Custom Software Development
   - Web & Mobile Applications
   - System Integration

2️⃣ *NovoNex Digital Works*
   - Digital Marketing
   - Social Media Management
   - Branding & SEO

*Click a button below or type 1 or 2 to continue.*"""

CONTACT_INFO_MESSAGE = f"""📞 *Contact Information*

*NovoNex Software Solutions:*
📱 Hotline: {SOFTWARE_HOTLINE}
📧 Email: {CONTACT_EMAIL}

*NovoNex Digital Works:*
📱 Hotline: {DIGITAL_HOTLINE}
📧 Email: {CONTACT_EMAIL}"""

# ============================================================
# COMPANY MENUS
# ============================================================

MENU_PAGE_HEADER = "*Select a service for details:*"

SOFTWARE_MENU_TITLE = "🏢 NovoNex Software Solutions – Page {page}/{total}"
DIGITAL_MENU_TITLE = "🚀 NovoNex Digital Works – Page {page}/{total}"

# One tuple of (service id, label) per page
SOFTWARE_MENU_PAGES = [
    [
        ("service1", "1️⃣ Custom Software Development"),
        ("service2", "2️⃣ Web Application Development"),
        ("service3", "3️⃣ Website Development"),
        ("service4", "4️⃣ E-Commerce Solutions"),
    ],
    [
        ("service5", "5️⃣ Mobile Application Development"),
        ("service6", "6️⃣ UI / UX Design"),
        ("service7", "7️⃣ AI & Automation Solutions"),
        ("service8", "8️⃣ System Integration & API Development"),
    ],
    [
        ("service9", "9️⃣ Cloud & Hosting Services"),
        ("service10", "🔟 Maintenance & Technical Support"),
        ("service11", "1️⃣1️⃣ Digital Solutions & Consulting"),
        ("service12", "1️⃣2️⃣ Branding & Digital Presence"),
    ],
]

DIGITAL_MENU_PAGES = [
    [
        ("service13", "1️⃣ Digital Marketing Strategy"),
        ("service14", "2️⃣ Social Media Marketing (SMM)"),
        ("service15", "3️⃣ Social Media Advertising"),
    ],
    [
        ("service16", "4️⃣ Content Creation & Design"),
        ("service17", "5️⃣ Search Engine Optimization (SEO)"),
        ("service18", "6️⃣ Search Engine Marketing (SEM)"),
    ],
    [
        ("service19", "7️⃣ Branding & Brand Identity"),
        ("service20", "8️⃣ Website & Funnel Marketing"),
        ("service21", "9️⃣ Email & WhatsApp Marketing"),
    ],
    [
        ("service22", "🔟 Influencer & Video Marketing"),
        ("service23", "1️⃣1️⃣ Analytics & Performance"),
        ("service24", "1️⃣2️⃣ Local & Business Marketing"),
        ("service25", "1️⃣3️⃣ Marketing Automation"),
    ],
]

# ============================================================
# SERVICE DETAILS - NOVONEX SOFTWARE SOLUTIONS
# ============================================================

_SOFTWARE_SERVICE_DETAILS = {
    "service1": """*1️⃣ Custom Software Development*

• *Business Management Systems*
• *Inventory / POS Systems*
• *Accounting & Billing Systems*
• *CRM / ERP Systems*""",

    "service2": """*2️⃣ Web Application Development*

• *Custom Web Applications*
• *Admin Dashboards*
• *Booking Systems*
• *Learning Management Systems (LMS)*
• *Job Portals / Classified Websites*
• *SaaS Platforms*

*Technologies:*
React, Next.js, Node.js, PHP, Laravel, MySQL, Firebase""",

    "service3": """*3️⃣ Website Development*

• *Business Websites*
• *Corporate Websites*
• *Portfolio Websites*
• *Blog & Content Websites*
• *Landing Pages*
• *Multi-language Websites*

✔️ Mobile Friendly
✔️ Fast Loading
✔️ SEO Ready""",

    "service4": """*4️⃣ E-Commerce Solutions*

• *Online Store Development*
• *Payment Gateway Integration*
• *Product & Order Management*
• *Customer Accounts*
• *Admin Panel*
• *Delivery & Invoice Systems*""",

    "service5": """*5️⃣ Mobile Application Development*

• *Android Applications*
• *iOS Applications*
• *Hybrid Apps (React Native / Flutter)*
• *App UI Design*
• *API Integration*""",

    "service6": """*6️⃣ UI / UX Design*

• *Website UI Design*
• *Mobile App UI Design*
• *Dashboard UI Design*
• *User Experience Optimization*
• *Figma / Adobe XD Designs*""",

    "service7": """*7️⃣ AI & Automation Solutions*

• *AI-powered Web Apps*
• *Chatbots*
• *Image / Content Generation Tools*
• *Automation Systems*
• *AI Integration for Businesses*""",

    "service8": """*8️⃣ System Integration & API Development*

• *Third-party API Integration*
• *Payment Gateways*
• *SMS / Email Systems*
• *Maps & Location Services*
• *ERP / CRM Integration*""",

    "service9": """*9️⃣ Cloud & Hosting Services*

• *Domain Registration*
• *Web Hosting*
• *Cloud Deployment*
• *Server Setup & Maintenance*
• *Backup & Security Management*""",

    "service10": """*🔟 Maintenance & Technical Support*

• *Software Maintenance*
• *Bug Fixing*
• *Feature Updates*
• *Performance Optimization*
• *Security Updates*""",

    "service11": """*1️⃣1️⃣ Digital Solutions & Consulting*

• *IT Consulting*
• *Business Digital Transformation*
• *System Planning & Architecture*
• *Startup Tech Consultation*""",

    "service12": """*1️⃣2️⃣ Branding & Digital Presence*

• *Logo Design*
• *Brand Identity*
• *Website Content Setup*
• *SEO Optimization*
• *Social Media Integration*""",
}

# ============================================================
# SERVICE DETAILS - NOVONEX DIGITAL WORKS
# ============================================================

_DIGITAL_SERVICE_DETAILS = {
    "service13": """*1️⃣ Digital Marketing Strategy & Consulting*

• *Business Digital Marketing Planning*
• *Brand Growth Strategy*
• *Campaign Planning*
• *Market & Competitor Analysis*
• *Marketing Consultation*""",

    "service14": """*2️⃣ Social Media Marketing (SMM)*

• *Facebook Marketing*
• *Instagram Marketing*
• *TikTok Marketing*
• *LinkedIn Marketing*
• *YouTube Channel Management*

✔️ Content Planning
✔️ Post Designing
✔️ Page Handling
✔️ Engagement Growth""",

    "service15": """*3️⃣ Social Media Advertising (Paid Ads)*

• *Facebook & Instagram Ads*
• *TikTok Ads*
• *Google Display Ads*
• *Lead Generation Campaigns*
• *Conversion & Sales Ads*
• *Retargeting Ads*""",

    "service16": """*4️⃣ Content Creation & Creative Design*

• *Graphic Design (Posts, Banners, Flyers)*
• *Video Editing (Reels, Shorts, Ads)*
• *Motion Graphics*
• *Brand Visual Design*
• *AI-based Creative Content*""",

    "service17": """*5️⃣ Search Engine Optimization (SEO)*

• *On-Page SEO*
• *Technical SEO*
• *Keyword Research*
• *Content Optimization*
• *Google Ranking Improvement*""",

    "service18": """*6️⃣ Search Engine Marketing (SEM)*

• *Google Search Ads*
• *Google Shopping Ads*
• *Keyword Targeted Campaigns*
• *ROI-focused Ad Management*""",

    "service19": """*7️⃣ Branding & Brand Identity*

• *Logo Design*
• *Brand Guidelines*
• *Color & Typography System*
• *Visual Identity Design*
• *Brand Positioning*""",

    "service20": """*8️⃣ Website & Funnel Marketing*

• *Landing Page Design*
• *Sales Funnel Setup*
• *Website Conversion Optimization*
• *Lead Capture Forms*
• *Email Integration*""",

    "service21": """*9️⃣ Email & WhatsApp Marketing*

• *Email Campaigns*
• *Newsletter Design*
• *WhatsApp Bulk Messaging*
• *Automation Setup*
• *Customer Follow-up Systems*""",

    "service22": """*🔟 Influencer & Video Marketing*

• *Influencer Collaborations*
• *YouTube Video Marketing*
• *Short-form Video Strategy*
• *Reels & TikTok Growth Plans*""",

    "service23": """*1️⃣1️⃣ Analytics & Performance Tracking*

• *Google Analytics Setup*
• *Meta Pixel Integration*
• *Campaign Performance Reports*
• *Audience Behavior Analysis*
• *Monthly Marketing Reports*""",

    "service24": """*1️⃣2️⃣ Local & Business Marketing*

• *Google My Business Optimization*
• *Local SEO*
• *Map-based Business Promotion*
• *Review & Reputation Management*""",

    "service25": """*1️⃣3️⃣ Marketing Automation*

• *CRM Integration*
• *Auto Lead Response Systems*
• *Chatbot Setup*
• *AI Automation for Marketing*""",
}

SERVICE_DETAILS = {
    **{
        service_id: f"{text}\n\n{SOFTWARE_CONTACT_FOOTER}"
        for service_id, text in _SOFTWARE_SERVICE_DETAILS.items()
    },
    **{
        service_id: f"{text}\n\n{DIGITAL_CONTACT_FOOTER}"
        for service_id, text in _DIGITAL_SERVICE_DETAILS.items()
    },
}

SERVICE_NOT_FOUND_MESSAGE = f"""*Service Details*

Service information not available.

📞 *Contact:*
NovoNex Software Solutions: {SOFTWARE_HOTLINE}
NovoNex Digital Works: {DIGITAL_HOTLINE}
📧 *Email:* {CONTACT_EMAIL}"""
