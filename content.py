"""
Site Content - Everything the portfolio pages display
Edit the dictionaries below to change the site. Rich text is wrapped in
Markup so templates render it as written. Values are frozen at import.
"""

from markupsafe import Markup
from utils.data import freeze


_first_name = 'Amey'
_last_name = 'Khaire'

person = {
    'firstName': _first_name,
    'lastName': _last_name,
    'name': f'{_first_name} {_last_name}',
    'role': 'Software Engineer',
    'avatar': '/images/avatar.png',
    'location': 'Asia/Kolkata',  # IANA time zone identifier, e.g. 'Europe/Vienna'
    'languages': ['English', 'Hindi', 'Marathi'],  # leave empty to hide languages
}

newsletter = {
    'display': False,
    'title': Markup("Subscribe to {}'s Newsletter").format(person['firstName']),
    'description': Markup(
        'I occasionally write about design, technology, and share thoughts on the '
        'intersection of creativity and engineering.'
    ),
}

# Links are displayed in this order
social = [
    {
        'name': 'GitHub',
        'icon': 'github',
        'link': 'https://github.com/techminion',
    },
    {
        'name': 'LinkedIn',
        'icon': 'linkedin',
        'link': 'https://www.linkedin.com/in/amey-khaire01/',
    },
    {
        'name': 'Email',
        'icon': 'email',
        'link': 'mailto:amey@khaire.dev',
    },
]

home = {
    'label': 'Home',
    'title': f"{person['name']}'s Portfolio",
    'description': f"Portfolio website showcasing my work as a {person['role']}",
    'headline': Markup('Developer and Tinkerer'),
    'subline': Markup(
        "I'm Amey, a freelance software engineer"
        '<br /> I build products for the web. After hours, I build my own projects.'
    ),
}

about = {
    'label': 'About',
    'title': 'About me',
    'description': f"Meet {person['name']}, {person['role']} from {person['location']}",
    'tableOfContent': {
        'display': True,
        'subItems': False,
    },
    'avatar': {
        'display': True,
    },
    'calendar': {
        'display': True,
        'link': 'https://cal.com/amey-khaire',
    },
    'intro': {
        'display': True,
        'title': 'Introduction',
        'description': Markup(
            'Amey is a Hyderabad-based software engineer with a passion for '
            'transforming complex challenges into simple, elegant software solutions. '
            'His work spans web applications, mobile apps, and the convergence of '
            'software and technology.'
        ),
    },
    'work': {
        'display': True,
        'title': 'Work Experience',
        'experiences': [
            {
                'company': 'Amazon',
                'timeframe': '2020 - 2024',
                'role': 'System Development Engineer',
                'achievements': [
                    Markup(
                        'Successfully migrated an existing Ruby on Rails application to '
                        'modern technologies, including React and GraphQL, to enhance user '
                        'experience, improve performance, and enable real-time data fetching.'
                    ),
                    Markup(
                        'Handled infrastructure migration for multiple Tier1 services in '
                        'order to improve the performance of the service and reduce the cost '
                        'of operation.'
                    ),
                    Markup(
                        'Developed a service which automates the migration of code base to '
                        'JDK17. This service is developed in Python.'
                    ),
                    Markup('Contributed to system design of multiple internal tools.'),
                ],
                'images': [
                    {
                        'src': '/images/work/amazon.png',
                        'alt': 'Amazon Logo',
                        'width': 25,
                        'height': 9,
                    },
                ],
            },
            {
                'company': 'Cybage',
                'timeframe': '2019 - 2020',
                'role': 'Software Engineer',
                'achievements': [
                    Markup(
                        'Streamlined the process of deployment for better ease of development '
                        'and testing. Created shell scripts which helped in setting up '
                        'scratch environments for development/testing purpose'
                    ),
                    Markup(
                        'Improved the payment flow for order paid using credit cards, which '
                        'helped in saving around $50k per month.'
                    ),
                    Markup(
                        'Led an Agile team in developing an e-commerce web application, '
                        'utilizing Laravel framework, React (JavaScript Library), HTML, CSS, '
                        'and AWS Lambda for serverless backend processing, improving '
                        'operational efficiency by 30%.'
                    ),
                ],
                'images': [
                    {
                        'src': '/images/work/cybage.png',
                        'alt': 'Cybage Logo',
                        'width': 25,
                        'height': 9,
                    },
                ],
            },
        ],
    },
    'studies': {
        'display': True,
        'title': 'Studies',
        'institutions': [
            {
                'name': 'Government College of Engineering, Jalgaon',
                'description': Markup('Studied Electronics and Telecommunication Engineering.'),
            },
            {
                'name': 'IACSD',
                'description': Markup('Studied Computer Science and Engineering.'),
            },
        ],
    },
    'technical': {
        'display': False,
        'title': 'Technical skills',
        'skills': [
            {
                'title': 'Figma',
                'description': Markup('Able to prototype in Figma with Once UI with unnatural speed.'),
                'images': [
                    {
                        'src': '/images/projects/project-01/cover-02.jpg',
                        'alt': 'Project image',
                        'width': 16,
                        'height': 9,
                    },
                    {
                        'src': '/images/projects/project-01/cover-03.jpg',
                        'alt': 'Project image',
                        'width': 16,
                        'height': 9,
                    },
                ],
            },
            {
                'title': 'Next.js',
                'description': Markup('Building next gen apps with Next.js + Once UI + Supabase.'),
                'images': [
                    {
                        'src': '/images/projects/project-01/cover-04.jpg',
                        'alt': 'Project image',
                        'width': 16,
                        'height': 9,
                    },
                ],
            },
        ],
    },
}

# Posts are the .md/.mdx files in posts/blog, listed on /blog
blog = {
    'label': 'Blog',
    'title': 'Writing about tech...',
    'description': f"Read what {person['name']} has been up to recently",
}

# Projects are the .md/.mdx files in posts/work, listed on / and /work
work = {
    'label': 'Work',
    'title': 'My projects',
    'description': f"Design and dev projects by {person['name']}",
}

gallery = {
    'label': 'Gallery',
    'title': 'My photo gallery',
    'description': f"A photo collection by {person['name']}",
    # Images from https://pexels.com
    'images': [
        {'src': '/images/gallery/img-01.jpg', 'alt': 'image', 'orientation': 'vertical'},
        {'src': '/images/gallery/img-02.jpg', 'alt': 'image', 'orientation': 'horizontal'},
        {'src': '/images/gallery/img-03.jpg', 'alt': 'image', 'orientation': 'vertical'},
        {'src': '/images/gallery/img-04.jpg', 'alt': 'image', 'orientation': 'horizontal'},
        {'src': '/images/gallery/img-05.jpg', 'alt': 'image', 'orientation': 'horizontal'},
        {'src': '/images/gallery/img-06.jpg', 'alt': 'image', 'orientation': 'vertical'},
        {'src': '/images/gallery/img-07.jpg', 'alt': 'image', 'orientation': 'horizontal'},
        {'src': '/images/gallery/img-08.jpg', 'alt': 'image', 'orientation': 'vertical'},
        {'src': '/images/gallery/img-09.jpg', 'alt': 'image', 'orientation': 'horizontal'},
        {'src': '/images/gallery/img-10.jpg', 'alt': 'image', 'orientation': 'horizontal'},
        {'src': '/images/gallery/img-11.jpg', 'alt': 'image', 'orientation': 'vertical'},
        {'src': '/images/gallery/img-12.jpg', 'alt': 'image', 'orientation': 'horizontal'},
        {'src': '/images/gallery/img-13.jpg', 'alt': 'image', 'orientation': 'horizontal'},
        {'src': '/images/gallery/img-14.jpg', 'alt': 'image', 'orientation': 'horizontal'},
    ],
}

person = freeze(person)
newsletter = freeze(newsletter)
social = freeze(social)
home = freeze(home)
about = freeze(about)
blog = freeze(blog)
work = freeze(work)
gallery = freeze(gallery)

__all__ = ['person', 'social', 'newsletter', 'home', 'about', 'blog', 'work', 'gallery']
