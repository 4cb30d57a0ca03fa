"""Built-in baseball trivia used by the static content provider."""

QUIZ_QUESTIONS = [
    ('Who has won the most MVP awards?', 'Barry Bonds', ['Mike Trout', 'Mickey Mantle', 'Albert Pujols']),
    ('Who has won the most Cy Young awards?', 'Roger Clemens', ['Randy Johnson', 'Greg Maddux', 'Clayton Kershaw']),
    ('Who was the 2024 AL MVP?', 'Aaron Judge', ['Shohei Ohtani', 'Juan Soto', 'Bobby Witt Jr.']),
    ('Who was the first Rookie of the Year?', 'Jackie Robinson', ['Willie Mays', 'Hank Aaron', 'Don Newcombe']),
    ('Which team has won the most World Series?', 'New York Yankees', ['St. Louis Cardinals', 'Boston Red Sox', 'San Francisco Giants']),
    ('Which team moved from Montreal?', 'Washington Nationals', ['Miami Marlins', 'Tampa Bay Rays', 'Toronto Blue Jays']),
    ('Which team plays at Wrigley Field?', 'Chicago Cubs', ['Chicago White Sox', 'St. Louis Cardinals', 'Milwaukee Brewers']),
    ('Which team has the "Green Monster"?', 'Boston Red Sox', ['Chicago Cubs', 'New York Yankees', 'Philadelphia Phillies']),
    ('Who has the most career hits?', 'Pete Rose', ['Ty Cobb', 'Hank Aaron', 'Stan Musial']),
    ('Who has the most career stolen bases?', 'Rickey Henderson', ['Lou Brock', 'Billy Hamilton', 'Ty Cobb']),
    ('Who holds the single-season HR record?', 'Barry Bonds', ['Mark McGwire', 'Sammy Sosa', 'Roger Maris']),
    ('Who is known as "The Iron Horse"?', 'Lou Gehrig', ['Babe Ruth', 'Joe DiMaggio', 'Cal Ripken Jr.']),
    ('Who is known as "Mr. October"?', 'Reggie Jackson', ['Derek Jeter', 'David Ortiz', 'Babe Ruth']),
    ('Who had a 56-game hitting streak?', 'Joe DiMaggio', ['Pete Rose', 'Ty Cobb', 'Ted Williams']),
    ('Which team broke a 108-year drought in 2016?', 'Chicago Cubs', ['Cleveland Indians', 'Boston Red Sox', 'Texas Rangers']),
]

# Nine grid categories, each with (question, correct, wrong options)
GRID_CHALLENGES = {
    'Nicknames': [
        ('Who is known as "The Kid"?', 'Ken Griffey Jr.', ['Mike Trout', 'Willie Mays', 'Mickey Mantle']),
        ('Who is known as "Big Papi"?', 'David Ortiz', ['Manny Ramirez', 'Albert Pujols', 'Prince Fielder']),
        ('Who is known as "The Big Unit"?', 'Randy Johnson', ['Roger Clemens', 'Nolan Ryan', 'CC Sabathia']),
    ],
    'Jersey Numbers': [
        ('What number did Derek Jeter wear?', '2', ['3', '7', '13']),
        ('What number is retired across all of MLB?', '42', ['21', '24', '44']),
        ('What number does Aaron Judge wear?', '99', ['27', '50', '17']),
    ],
    'Records': [
        ('Who has the most career home runs?', 'Barry Bonds', ['Hank Aaron', 'Babe Ruth', 'Alex Rodriguez']),
        ('Who has the most career strikeouts?', 'Nolan Ryan', ['Randy Johnson', 'Roger Clemens', 'Steve Carlton']),
        ('Who has the most career hits?', 'Pete Rose', ['Ty Cobb', 'Hank Aaron', 'Stan Musial']),
    ],
    'World Series': [
        ('Who was the 2024 World Series MVP?', 'Freddie Freeman', ['Mookie Betts', 'Shohei Ohtani', 'Walker Buehler']),
        ('Which team won the 2023 World Series?', 'Texas Rangers', ['Arizona Diamondbacks', 'Houston Astros', 'Philadelphia Phillies']),
        ('Which team broke an 86-year drought in 2004?', 'Boston Red Sox', ['Chicago Cubs', 'Cleveland Indians', 'Chicago White Sox']),
    ],
    'Awards': [
        ('Who was the first unanimous MVP?', 'Shohei Ohtani', ['Mike Trout', 'Bryce Harper', 'Ken Griffey Jr.']),
        ('Who has the most Gold Glove awards?', 'Greg Maddux', ['Ozzie Smith', 'Roberto Clemente', 'Keith Hernandez']),
        ('Who was the 2024 NL MVP?', 'Shohei Ohtani', ['Mookie Betts', 'Freddie Freeman', 'Francisco Lindor']),
    ],
    'Ballparks': [
        ('Which team plays at Fenway Park?', 'Boston Red Sox', ['New York Yankees', 'Baltimore Orioles', 'Toronto Blue Jays']),
        ('Which team plays at Wrigley Field?', 'Chicago Cubs', ['Chicago White Sox', 'St. Louis Cardinals', 'Milwaukee Brewers']),
        ('Which team plays at Oracle Park?', 'San Francisco Giants', ['Oakland Athletics', 'Los Angeles Dodgers', 'San Diego Padres']),
    ],
    'Team History': [
        ('Which team did Babe Ruth play for before the Yankees?', 'Boston Red Sox', ['Chicago White Sox', 'Detroit Tigers', 'Philadelphia Athletics']),
        ('Which team moved from Montreal?', 'Washington Nationals', ['Miami Marlins', 'Tampa Bay Rays', 'Toronto Blue Jays']),
        ('Which team lost 4 straight World Series (1921-24)?', 'New York Giants', ['Brooklyn Dodgers', 'Chicago Cubs', 'Boston Red Sox']),
    ],
    'All-Stars': [
        ('Who has the most All-Star selections?', 'Hank Aaron', ['Willie Mays', 'Stan Musial', 'Cal Ripken Jr.']),
        ('Where was the 2024 All-Star Game held?', 'Arlington', ['Los Angeles', 'Seattle', 'Philadelphia']),
        ('Who won the 2022 All-Star Game MVP?', 'Giancarlo Stanton', ['Juan Soto', 'Aaron Judge', 'Shohei Ohtani']),
    ],
    'Historic Moments': [
        ('Who broke the color barrier in 1947?', 'Jackie Robinson', ['Larry Doby', 'Satchel Paige', 'Roy Campanella']),
        ('Who threw a perfect game in the World Series?', 'Don Larsen', ['Sandy Koufax', 'Bob Gibson', 'Whitey Ford']),
        ('Who pitched 7 no-hitters?', 'Nolan Ryan', ['Sandy Koufax', 'Randy Johnson', 'Justin Verlander']),
    ],
}

SPEED_ROUNDS = [
    {
        'title': 'Name the last 5 World Series winners',
        'clue': '2024 back to 2020',
        'answers': ['Los Angeles Dodgers', 'Texas Rangers', 'Houston Astros', 'Atlanta Braves', 'Los Angeles Dodgers'],
        'points': [50, 50, 50, 50, 50],
    },
    {
        'title': 'Name the top 5 career home run leaders',
        'clue': 'All-time MLB records',
        'answers': ['Barry Bonds', 'Hank Aaron', 'Babe Ruth', 'Albert Pujols', 'Alex Rodriguez'],
        'points': [100, 100, 100, 100, 100],
    },
    {
        'title': 'Name the top 5 career hits leaders',
        'clue': 'All-time MLB records',
        'answers': ['Pete Rose', 'Ty Cobb', 'Hank Aaron', 'Stan Musial', 'Tris Speaker'],
        'points': [100, 80, 60, 40, 20],
    },
    {
        'title': 'Name the 5 teams in the AL East',
        'clue': 'Current division alignment, by 2024 finish',
        'answers': ['New York Yankees', 'Baltimore Orioles', 'Boston Red Sox', 'Tampa Bay Rays', 'Toronto Blue Jays'],
        'points': [100, 100, 100, 100, 100],
    },
    {
        'title': 'Name the 5 teams in the NL West',
        'clue': 'Current division alignment, by 2024 finish',
        'answers': ['Los Angeles Dodgers', 'San Diego Padres', 'Arizona Diamondbacks', 'San Francisco Giants', 'Colorado Rockies'],
        'points': [100, 100, 100, 100, 100],
    },
    {
        'title': 'Name the top 5 career strikeout leaders',
        'clue': 'Pitching, all time',
        'answers': ['Nolan Ryan', 'Randy Johnson', 'Roger Clemens', 'Steve Carlton', 'Bert Blyleven'],
        'points': [100, 80, 60, 40, 20],
    },
]
